import os
from dotenv import load_dotenv

load_dotenv(dotenv_path='.env')

class Config:

    # Supabase Configuration
    SUPABASE_URL = os.getenv('SUPABASE_URL')
    SUPABASE_KEY = os.getenv('SUPABASE_KEY')

    # Flask Configuration
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('FLASK_DEBUG', 'False').lower() in ('true', '1', 't')
    TESTING = os.getenv('FLASK_TESTING', 'False').lower() in ('true', '1', 't')
    USE_RELOADER = DEBUG

    # Clave compartida para eliminar y rechazar registros
    ADMIN_KEY = os.getenv('ADMIN_KEY', 'admin123')

    # Zona horaria usada en reportes y fechas por defecto
    TIMEZONE = os.getenv('TIMEZONE', 'America/Bogota')

    # Subida de archivos Excel (10 MB)
    MAX_CONTENT_LENGTH = int(os.getenv('MAX_CONTENT_LENGTH', 10 * 1024 * 1024))

    # Pagination
    DEFAULT_PAGE_SIZE = 20
    MAX_PAGE_SIZE = 100
