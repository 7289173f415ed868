from functools import wraps
import hmac
import logging
from flask import current_app, jsonify, request

logger = logging.getLogger(__name__)


def _clave_enviada() -> str:
    """Obtiene la clave de administrador desde la cabecera o el cuerpo JSON."""
    clave = request.headers.get('X-Admin-Key')
    if clave:
        return clave
    datos = request.get_json(silent=True) or {}
    return str(datos.get('admin_key') or '')


def admin_key_required(accion: str):
    """
    Decorador que exige la clave de administrador para acciones destructivas
    (eliminar o rechazar registros).
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            esperada = current_app.config.get('ADMIN_KEY') or ''
            enviada = _clave_enviada()

            if not esperada or not hmac.compare_digest(enviada.encode(), esperada.encode()):
                logger.warning(f"Clave de administrador incorrecta para la acción '{accion}' desde {request.remote_addr}")
                return jsonify({
                    'success': False,
                    'error': f'Clave incorrecta. No se puede {accion}.'
                }), 403

            return f(*args, **kwargs)
        return decorated_function
    return decorator
