import pytest
from unittest.mock import patch
from app.controllers.traslado_materia_prima_controller import TrasladoMateriaPrimaController

# --- Fixtures ---

@pytest.fixture
def mock_dependencies():
    with patch('app.controllers.traslado_materia_prima_controller.TrasladoMateriaPrimaModel') as MockTrasladoModel, \
         patch('app.controllers.traslado_materia_prima_controller.MaterialModel') as MockMaterialModel:
        mocks = {
            "traslado_model": MockTrasladoModel.return_value,
            "material_model": MockMaterialModel.return_value,
        }
        yield mocks

@pytest.fixture
def controller(mock_dependencies):
    controller = TrasladoMateriaPrimaController()
    controller.model = mock_dependencies['traslado_model']
    controller.material_model = mock_dependencies['material_model']
    return controller

def _traslado(estado):
    return {'success': True, 'data': {'id': 'tr-1', 'status': estado}}

# --- Creación ---

def test_crear_traslado_exitoso(controller, mock_dependencies):
    mock_dependencies['material_model'].find_by_id.return_value = {'success': True, 'data': {'id': 'mp-1', 'type': 'Materia Prima'}}
    mock_dependencies['traslado_model'].create.return_value = {'success': True, 'data': {'id': 'tr-1'}}

    _, status_code = controller.crear_traslado({
        'material_id': 'mp-1', 'quantity': 25, 'transfer_employee_id': 'lab-1', 'transfer_date': '2024-05-15'
    })

    assert status_code == 201
    datos = mock_dependencies['traslado_model'].create.call_args[0][0]
    assert datos['status'] == 'PENDIENTE'
    assert datos['quantity'] == 25.0

def test_crear_traslado_material_no_es_materia_prima(controller, mock_dependencies):
    mock_dependencies['material_model'].find_by_id.return_value = {'success': True, 'data': {'id': 'pt-1', 'type': 'Producto Terminado'}}

    _, status_code = controller.crear_traslado({'material_id': 'pt-1', 'quantity': 5, 'transfer_employee_id': 'lab-1'})

    assert status_code == 422
    mock_dependencies['traslado_model'].create.assert_not_called()

def test_crear_traslado_cantidad_negativa(controller, mock_dependencies):
    _, status_code = controller.crear_traslado({'material_id': 'mp-1', 'quantity': -3, 'transfer_employee_id': 'lab-1'})

    assert status_code == 422

# --- Recepción y rechazo ---

def test_recibir_traslado_pendiente(controller, mock_dependencies):
    mock_dependencies['traslado_model'].find_by_id.return_value = _traslado('PENDIENTE')
    mock_dependencies['traslado_model'].update.return_value = {'success': True, 'data': {'id': 'tr-1', 'status': 'RECIBIDO'}}

    _, status_code = controller.recibir_traslado('tr-1', {'received_employee_id': 'lab-2', 'received_quantity': 24.5})

    assert status_code == 200
    traslado_id, cambios = mock_dependencies['traslado_model'].update.call_args[0]
    assert traslado_id == 'tr-1'
    assert cambios['status'] == 'RECIBIDO'
    assert cambios['received_quantity'] == 24.5
    assert cambios['received_employee_id'] == 'lab-2'
    assert 'received_at' in cambios

@pytest.mark.parametrize("estado", ['RECIBIDO', 'RECHAZADO'])
def test_recibir_traslado_fuera_de_flujo(controller, mock_dependencies, estado):
    mock_dependencies['traslado_model'].find_by_id.return_value = _traslado(estado)

    response, status_code = controller.recibir_traslado('tr-1', {'received_employee_id': 'lab-2', 'received_quantity': 1})

    assert status_code == 409
    assert estado in response['error']
    mock_dependencies['traslado_model'].update.assert_not_called()

@pytest.mark.parametrize("datos", [
    {'received_quantity': 10},
    {'received_employee_id': 'lab-2', 'received_quantity': 0},
])
def test_recibir_traslado_datos_invalidos(controller, mock_dependencies, datos):
    _, status_code = controller.recibir_traslado('tr-1', datos)

    assert status_code == 422
    mock_dependencies['traslado_model'].find_by_id.assert_not_called()

def test_rechazar_traslado_pendiente(controller, mock_dependencies):
    mock_dependencies['traslado_model'].find_by_id.return_value = _traslado('PENDIENTE')
    mock_dependencies['traslado_model'].update.return_value = {'success': True, 'data': {'status': 'RECHAZADO'}}

    _, status_code = controller.rechazar_traslado('tr-1')

    assert status_code == 200
    mock_dependencies['traslado_model'].update.assert_called_once_with('tr-1', {'status': 'RECHAZADO'})

def test_rechazar_traslado_inexistente(controller, mock_dependencies):
    mock_dependencies['traslado_model'].find_by_id.return_value = {'success': False}

    _, status_code = controller.rechazar_traslado('tr-x')

    assert status_code == 404

# --- Listados ---

def test_obtener_pendientes(controller, mock_dependencies):
    mock_dependencies['traslado_model'].find_by_estado.return_value = {'success': True, 'data': []}

    _, status_code = controller.obtener_pendientes()

    assert status_code == 200
    mock_dependencies['traslado_model'].find_by_estado.assert_called_once_with('PENDIENTE')

def test_obtener_traslados_estado_invalido(controller, mock_dependencies):
    _, status_code = controller.obtener_traslados({'estado': 'PERDIDO'})

    assert status_code == 400

def test_eliminar_traslado(controller, mock_dependencies):
    mock_dependencies['traslado_model'].find_by_id.return_value = _traslado('RECIBIDO')
    mock_dependencies['traslado_model'].delete.return_value = {'success': True}

    _, status_code = controller.eliminar_traslado('tr-1')

    assert status_code == 200
    mock_dependencies['traslado_model'].delete.assert_called_once_with('tr-1')
