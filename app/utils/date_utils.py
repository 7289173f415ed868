from datetime import datetime, date, timezone
import pandas as pd
import pytz
from app.config import Config


def get_now_local() -> datetime:
    """
    Devuelve el datetime actual en la zona horaria configurada para la planta.
    """
    return datetime.now(pytz.timezone(Config.TIMEZONE))


def get_today_local() -> date:
    return get_now_local().date()


def utc_now_iso() -> str:
    """Marca de tiempo UTC en ISO 8601, usada en `received_at`."""
    return datetime.now(timezone.utc).isoformat()


def formatear_fecha(valor) -> str:
    """
    Formatea una fecha (string ISO, date o datetime) como dd/mm/yyyy en la
    zona horaria configurada. Devuelve el valor recibido si no es una fecha.
    """
    if not valor:
        return ""
    if isinstance(valor, str):
        try:
            valor = pd.to_datetime(valor)
        except (ValueError, OverflowError):
            return valor
    if isinstance(valor, datetime):
        if valor.tzinfo is not None:
            valor = valor.astimezone(pytz.timezone(Config.TIMEZONE))
        return valor.strftime('%d/%m/%Y')
    if isinstance(valor, date):
        return valor.strftime('%d/%m/%Y')
    return str(valor)
