from datetime import date, datetime
import re
from typing import Any, Dict, Optional

_FECHA_ISO = re.compile(r'^\d{4}-\d{2}-\d{2}$')


def validate_pagination(page: int, page_size: int, max_page_size: int = 100) -> Dict[str, str]:
    """
    Valida los parámetros de paginación para asegurar que estén dentro de rangos lógicos.
    """
    errors = {}
    if page < 1:
        errors['page'] = 'El número de página debe ser mayor a 0.'
    if page_size < 1:
        errors['page_size'] = 'El tamaño de página debe ser mayor a 0.'
    if page_size > max_page_size:
        errors['page_size'] = f'El tamaño máximo de página permitido es {max_page_size}.'
    return errors


def is_fecha_iso(value: Any) -> bool:
    """True si el valor es un string con formato estricto YYYY-MM-DD y fecha real."""
    if not isinstance(value, str) or not _FECHA_ISO.match(value):
        return False
    try:
        date.fromisoformat(value)
        return True
    except ValueError:
        return False


def normalize_date(date_value: Any) -> Optional[str]:
    """
    Normaliza un valor de fecha (string, date, o datetime) a un string en formato ISO (YYYY-MM-DD).
    """
    if date_value is None:
        return None
    if isinstance(date_value, str):
        try:
            return datetime.fromisoformat(date_value).date().isoformat()
        except ValueError:
            return date_value
    if isinstance(date_value, datetime):
        return date_value.date().isoformat()
    if isinstance(date_value, date):
        return date_value.isoformat()

    return str(date_value)
