import pytest
from unittest.mock import patch
from app.controllers.traslado_producto_terminado_controller import TrasladoProductoTerminadoController

EMPAQUE_BOLSA = {'id': 'me-1', 'material_code': 'ME-001', 'material_name': 'Bolsa al vacío', 'unit': 'unidad', 'type': 'Material de Empaque'}

# --- Fixtures ---

@pytest.fixture
def mock_dependencies():
    with patch('app.controllers.traslado_producto_terminado_controller.TrasladoProductoTerminadoModel') as MockTrasladoModel, \
         patch('app.controllers.traslado_producto_terminado_controller.MaterialModel') as MockMaterialModel:
        mocks = {
            "traslado_model": MockTrasladoModel.return_value,
            "material_model": MockMaterialModel.return_value,
        }
        yield mocks

@pytest.fixture
def controller(mock_dependencies):
    controller = TrasladoProductoTerminadoController()
    controller.model = mock_dependencies['traslado_model']
    controller.material_model = mock_dependencies['material_model']
    return controller

def _traslado(estado):
    return {'success': True, 'data': {'id': 'pt-tr-1', 'status': estado}}

# --- Flujo empaque -> bodega ---

def test_recibir_en_empaque_pasa_a_finalizado_bodega(controller, mock_dependencies):
    mock_dependencies['traslado_model'].find_by_id.return_value = _traslado('PENDIENTE')
    mock_dependencies['material_model'].find_all.return_value = {'success': True, 'data': [EMPAQUE_BOLSA]}
    mock_dependencies['traslado_model'].update.return_value = {'success': True, 'data': {'status': 'FINALIZADO_BODEGA'}}

    _, status_code = controller.recibir_en_empaque('pt-tr-1', {
        'received_employee_id': 'lab-3',
        'received_quantity': 10,
        'num_boxes': 4,
        'packaging_materials_used': [{'material_id': 'me-1', 'quantity': 40}],
    })

    assert status_code == 200
    _, cambios = mock_dependencies['traslado_model'].update.call_args[0]
    assert cambios['status'] == 'FINALIZADO_BODEGA'
    assert cambios['num_boxes'] == 4
    assert cambios['packaging_materials_used'][0]['material_name'] == 'Bolsa al vacío'

def test_recibir_en_empaque_sin_cajas(controller, mock_dependencies):
    _, status_code = controller.recibir_en_empaque('pt-tr-1', {'received_employee_id': 'lab-3', 'received_quantity': 10})

    assert status_code == 422

@pytest.mark.parametrize("num_boxes", [2.7, '4', 0])
def test_recibir_en_empaque_cajas_deben_ser_entero_positivo(controller, mock_dependencies, num_boxes):
    mock_dependencies['traslado_model'].find_by_id.return_value = _traslado('PENDIENTE')

    _, status_code = controller.recibir_en_empaque('pt-tr-1', {
        'received_employee_id': 'lab-3', 'received_quantity': 5, 'num_boxes': num_boxes,
    })

    assert status_code == 422
    mock_dependencies['traslado_model'].update.assert_not_called()

def test_crear_traslado_rechaza_cajas_fraccionarias(controller, mock_dependencies):
    _, status_code = controller.crear_traslado({
        'material_id': 'pt-1', 'quantity': 12, 'num_boxes': 2.7, 'transfer_employee_id': 'lab-1'
    })

    assert status_code == 422
    mock_dependencies['traslado_model'].create.assert_not_called()

def test_recepcion_final_desde_finalizado_bodega(controller, mock_dependencies):
    mock_dependencies['traslado_model'].find_by_id.return_value = _traslado('FINALIZADO_BODEGA')
    mock_dependencies['traslado_model'].update.return_value = {'success': True, 'data': {'status': 'RECIBIDO'}}

    _, status_code = controller.recepcion_final('pt-tr-1', {'received_employee_id': 'lab-4', 'received_quantity': 10})

    assert status_code == 200
    _, cambios = mock_dependencies['traslado_model'].update.call_args[0]
    assert cambios['status'] == 'RECIBIDO'

@pytest.mark.parametrize("datos_extra, esperado", [
    ({}, None),
    ({'observations': 'Llegó completo'}, 'Llegó completo'),
    ({'observations': ''}, ''),
    ({'observations': None}, ''),
])
def test_recepcion_final_observaciones(controller, mock_dependencies, datos_extra, esperado):
    mock_dependencies['traslado_model'].find_by_id.return_value = _traslado('FINALIZADO_BODEGA')
    mock_dependencies['traslado_model'].update.return_value = {'success': True, 'data': {'status': 'RECIBIDO'}}

    controller.recepcion_final('pt-tr-1', {'received_employee_id': 'lab-4', 'received_quantity': 10, **datos_extra})

    _, cambios = mock_dependencies['traslado_model'].update.call_args[0]
    if esperado is None:
        # sin observaciones se conservan las del traslado
        assert 'observations' not in cambios
    else:
        assert cambios['observations'] == esperado

def test_recepcion_final_requiere_paso_por_empaque(controller, mock_dependencies):
    mock_dependencies['traslado_model'].find_by_id.return_value = _traslado('PENDIENTE')

    _, status_code = controller.recepcion_final('pt-tr-1', {'received_employee_id': 'lab-4', 'received_quantity': 10})

    assert status_code == 409
    mock_dependencies['traslado_model'].update.assert_not_called()

@pytest.mark.parametrize("estado, esperado", [
    ('PENDIENTE', 200),
    ('FINALIZADO_BODEGA', 200),
    ('RECIBIDO', 409),
    ('RECHAZADO', 409),
])
def test_rechazar_traslado_segun_estado(controller, mock_dependencies, estado, esperado):
    mock_dependencies['traslado_model'].find_by_id.return_value = _traslado(estado)
    mock_dependencies['traslado_model'].update.return_value = {'success': True, 'data': {'status': 'RECHAZADO'}}

    _, status_code = controller.rechazar_traslado('pt-tr-1')

    assert status_code == esperado

# --- Creación manual y listados ---

def test_crear_traslado_resuelve_subproductos(controller, mock_dependencies):
    mock_dependencies['material_model'].find_by_id.return_value = {'success': True, 'data': {'id': 'pt-1', 'type': 'Producto Terminado'}}
    mock_dependencies['material_model'].find_all.return_value = {'success': True, 'data': [
        {'id': 'sp-1', 'material_code': 'SP-001', 'material_name': 'Grasa', 'unit': 'kilos', 'type': 'Subproducto'}
    ]}
    mock_dependencies['traslado_model'].create.return_value = {'success': True, 'data': {'id': 'pt-tr-2'}}

    _, status_code = controller.crear_traslado({
        'material_id': 'pt-1', 'quantity': 12, 'num_boxes': 3, 'transfer_employee_id': 'lab-1',
        'byproducts_transferred': [{'material_id': 'sp-1', 'quantity': 2}],
    })

    assert status_code == 201
    datos = mock_dependencies['traslado_model'].create.call_args[0][0]
    assert datos['status'] == 'PENDIENTE'
    assert datos['byproducts_transferred'][0]['material_code'] == 'SP-001'

def test_crear_traslado_requiere_producto_terminado(controller, mock_dependencies):
    mock_dependencies['material_model'].find_by_id.return_value = {'success': True, 'data': {'id': 'mp-1', 'type': 'Materia Prima'}}

    _, status_code = controller.crear_traslado({
        'material_id': 'mp-1', 'quantity': 12, 'num_boxes': 3, 'transfer_employee_id': 'lab-1'
    })

    assert status_code == 422

def test_pendientes_de_bodega(controller, mock_dependencies):
    mock_dependencies['traslado_model'].find_by_estado.return_value = {'success': True, 'data': [{'id': 'a'}]}

    response, status_code = controller.obtener_pendientes_bodega()

    assert status_code == 200
    assert response['data'] == [{'id': 'a'}]
    mock_dependencies['traslado_model'].find_by_estado.assert_called_once_with('FINALIZADO_BODEGA')

def test_pendientes_de_empaque(controller, mock_dependencies):
    mock_dependencies['traslado_model'].find_by_estado.return_value = {'success': True, 'data': []}

    controller.obtener_pendientes_empaque()

    mock_dependencies['traslado_model'].find_by_estado.assert_called_once_with('PENDIENTE')
