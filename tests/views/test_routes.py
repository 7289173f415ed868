import pytest
from io import BytesIO
from unittest.mock import patch
from app import create_app

ADMIN_KEY = 'clave-de-prueba'

# --- Fixtures ---

@pytest.fixture
def app():
    app = create_app()
    app.config.update({"TESTING": True, "ADMIN_KEY": ADMIN_KEY})
    yield app

@pytest.fixture
def client(app):
    return app.test_client()

# --- Clave de administrador ---

@patch('app.views.material_routes.MaterialController')
def test_eliminar_material_sin_clave(MockController, client):
    response = client.delete('/api/materiales/m-1')

    assert response.status_code == 403
    assert 'Clave incorrecta' in response.get_json()['error']
    MockController.return_value.eliminar_material.assert_not_called()

@patch('app.views.material_routes.MaterialController')
def test_eliminar_material_con_clave(MockController, client):
    MockController.return_value.eliminar_material.return_value = ({'success': True}, 200)

    response = client.delete('/api/materiales/m-1', headers={'X-Admin-Key': ADMIN_KEY})

    assert response.status_code == 200
    MockController.return_value.eliminar_material.assert_called_once_with('m-1')

@pytest.mark.parametrize("metodo, url", [
    ('delete', '/api/ordenes/op-1'),
    ('delete', '/api/planes/p-1'),
    ('delete', '/api/traslados/materia-prima/t-1'),
    ('delete', '/api/traslados/producto-terminado/t-1'),
    ('post', '/api/traslados/producto-terminado/t-1/rechazar'),
])
def test_acciones_destructivas_exigen_clave(client, metodo, url):
    response = getattr(client, metodo)(url, json={'admin_key': 'incorrecta'})
    assert response.status_code == 403

@patch('app.views.traslado_routes.TrasladoMateriaPrimaController')
def test_rechazar_materia_prima_no_exige_clave(MockController, client):
    MockController.return_value.rechazar_traslado.return_value = ({'success': True}, 200)

    response = client.post('/api/traslados/materia-prima/t-1/rechazar')

    assert response.status_code == 200

@patch('app.views.traslado_routes.TrasladoProductoTerminadoController')
def test_rechazar_producto_terminado_con_clave_en_cuerpo(MockController, client):
    MockController.return_value.rechazar_traslado.return_value = ({'success': True}, 200)

    response = client.post('/api/traslados/producto-terminado/t-1/rechazar', json={'admin_key': ADMIN_KEY})

    assert response.status_code == 200
    MockController.return_value.rechazar_traslado.assert_called_once_with('t-1')

# --- Endpoints JSON ---

@patch('app.views.orden_produccion_routes.OrdenProduccionController')
def test_listar_ordenes_pasa_filtros(MockController, client):
    MockController.return_value.obtener_ordenes.return_value = ({'success': True, 'data': []}, 200)

    response = client.get('/api/ordenes?estado=PENDIENTE&page=1')

    assert response.status_code == 200
    MockController.return_value.obtener_ordenes.assert_called_once_with({'estado': 'PENDIENTE', 'page': '1'})

def test_crear_orden_sin_json(client):
    response = client.post('/api/ordenes', data='texto', content_type='text/plain')
    assert response.status_code == 400

@patch('app.views.catalogo_routes.RotuladorController')
def test_crear_rotuladores_en_lote(MockController, client):
    MockController.return_value.crear_rotuladores.return_value = ({'success': True, 'data': []}, 201)

    response = client.post('/api/rotuladores', json=[{'cedula': '1', 'name': 'Ana'}])

    assert response.status_code == 201
    MockController.return_value.crear_rotulador.assert_not_called()

@patch('app.views.main_routes.DashboardController')
def test_conexion_fallida(MockController, client):
    MockController.return_value.probar_conexion.return_value = ({'success': False, 'error': 'sin red'}, 503)

    response = client.get('/api/conexion')

    assert response.status_code == 503
    assert response.get_json()['success'] is False

def test_endpoint_inexistente(client):
    response = client.get('/api/no-existe')

    assert response.status_code == 404
    assert response.get_json() == {'success': False, 'error': 'Endpoint no encontrado'}

# --- Excel ---

@patch('app.views.reportes_routes.ReporteController')
def test_descargar_reporte_ordenes(MockController, client):
    MockController.return_value.generar_reporte_ordenes.return_value = (BytesIO(b'xlsx'), 'PVA_Ordenes_2024-05-15.xlsx')

    response = client.get('/api/reportes/ordenes')

    assert response.status_code == 200
    assert 'PVA_Ordenes_2024-05-15.xlsx' in response.headers['Content-Disposition']

@patch('app.views.reportes_routes.ReporteController')
def test_descargar_reporte_con_error(MockController, client):
    MockController.return_value.generar_reporte_completo.return_value = (None, None)

    response = client.get('/api/reportes/completo')

    assert response.status_code == 500

def test_plantilla_desconocida(client):
    response = client.get('/api/reportes/plantillas/clientes')
    assert response.status_code == 404

def test_importar_sin_archivo(client):
    response = client.post('/api/importar', data={}, content_type='multipart/form-data')
    assert response.status_code == 400

@patch('app.views.reportes_routes.ImportacionController')
def test_importar_delega_en_controlador(MockController, client):
    MockController.return_value.importar_archivo.return_value = ({'success': True, 'data': {'importados': 0, 'errores': []}}, 200)

    response = client.post(
        '/api/importar',
        data={'archivo': (BytesIO(b'contenido'), 'datos.xlsx')},
        content_type='multipart/form-data'
    )

    assert response.status_code == 200
    MockController.return_value.importar_archivo.assert_called_once()
