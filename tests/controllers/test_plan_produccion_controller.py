import pytest
from unittest.mock import patch
from app.controllers.plan_produccion_controller import PlanProduccionController

PLANES = [
    {'id': 'p-1', 'planned_date': '2024-05-01', 'material': {'material_code': 'PT-001', 'material_name': 'Chorizo Santarrosano'}},
    {'id': 'p-2', 'planned_date': '2024-05-02', 'material': {'material_code': 'PT-002', 'material_name': 'Morcilla'}},
    {'id': 'p-3', 'planned_date': '2024-05-03', 'material': None},
]

# --- Fixtures ---

@pytest.fixture
def mock_dependencies():
    with patch('app.controllers.plan_produccion_controller.PlanProduccionModel') as MockPlanModel, \
         patch('app.controllers.plan_produccion_controller.MaterialModel') as MockMaterialModel:
        mocks = {
            "plan_model": MockPlanModel.return_value,
            "material_model": MockMaterialModel.return_value,
        }
        yield mocks

@pytest.fixture
def plan_controller(mock_dependencies):
    controller = PlanProduccionController()
    controller.model = mock_dependencies['plan_model']
    controller.material_model = mock_dependencies['material_model']
    return controller

# --- Filtros ---

def test_obtener_planes_dia_exacto(plan_controller, mock_dependencies):
    mock_dependencies['plan_model'].find_all.return_value = {'success': True, 'data': []}

    _, status_code = plan_controller.obtener_planes({'fecha_inicio': '2024-05-01'})

    assert status_code == 200
    mock_dependencies['plan_model'].find_all.assert_called_once_with(filters={'planned_date': '2024-05-01'})

def test_obtener_planes_rango_inclusivo(plan_controller, mock_dependencies):
    mock_dependencies['plan_model'].find_all.return_value = {'success': True, 'data': []}

    plan_controller.obtener_planes({'fecha_inicio': '2024-05-01', 'fecha_fin': '2024-05-31'})

    mock_dependencies['plan_model'].find_all.assert_called_once_with(filters={
        'planned_date_gte': '2024-05-01',
        'planned_date_lt': '2024-06-01',
    })

def test_obtener_planes_fin_sin_inicio_no_filtra_fecha(plan_controller, mock_dependencies):
    mock_dependencies['plan_model'].find_all.return_value = {'success': True, 'data': PLANES}

    response, status_code = plan_controller.obtener_planes({'fecha_fin': '2024-05-01'})

    assert status_code == 200
    assert len(response['data']) == 3
    mock_dependencies['plan_model'].find_all.assert_called_once_with(filters={})

@pytest.mark.parametrize("referencia, esperados", [
    ('pt-00', ['p-1', 'p-2']),
    ('SANTARROS', ['p-1']),
    ('morcilla', ['p-2']),
    ('inexistente', []),
])
def test_obtener_planes_por_referencia(plan_controller, mock_dependencies, referencia, esperados):
    mock_dependencies['plan_model'].find_all.return_value = {'success': True, 'data': PLANES}

    response, _ = plan_controller.obtener_planes({'referencia': referencia})

    assert [p['id'] for p in response['data']] == esperados

@pytest.mark.parametrize("filtros", [
    {'fecha_inicio': '01/05/2024'},
    {'fecha_inicio': '2024-02-30'},
    {'fecha_inicio': '2024-05-01', 'fecha_fin': '31/05/2024'},
])
def test_obtener_planes_filtros_invalidos(plan_controller, mock_dependencies, filtros):
    _, status_code = plan_controller.obtener_planes(filtros)

    assert status_code == 400
    mock_dependencies['plan_model'].find_all.assert_not_called()

# --- Creación ---

def test_crear_plan_exitoso(plan_controller, mock_dependencies):
    mock_dependencies['material_model'].find_all.return_value = {'success': True, 'data': [
        {'id': 'pt-1', 'material_name': 'Chorizo', 'type': 'Producto Terminado'}
    ]}
    mock_dependencies['plan_model'].create.return_value = {'success': True, 'data': {'id': 'p-9'}}

    _, status_code = plan_controller.crear_plan({'material_id': 'pt-1', 'planned_quantity': 150, 'planned_date': '2024-06-01'})

    assert status_code == 201
    mock_dependencies['plan_model'].create.assert_called_once()

def test_crear_plan_material_no_terminado(plan_controller, mock_dependencies):
    mock_dependencies['material_model'].find_all.return_value = {'success': True, 'data': [
        {'id': 'mp-1', 'material_name': 'Carne', 'type': 'Materia Prima'}
    ]}

    response, status_code = plan_controller.crear_plan({'material_id': 'mp-1', 'planned_quantity': 10, 'planned_date': '2024-06-01'})

    assert status_code == 422
    assert 'Producto Terminado' in response['error']
    mock_dependencies['plan_model'].create.assert_not_called()

@pytest.mark.parametrize("datos", [
    {'material_id': 'pt-1', 'planned_quantity': 0, 'planned_date': '2024-06-01'},
    {'material_id': 'pt-1', 'planned_quantity': 5, 'planned_date': '01-06-2024'},
    {'planned_quantity': 5, 'planned_date': '2024-06-01'},
])
def test_crear_plan_datos_invalidos(plan_controller, mock_dependencies, datos):
    _, status_code = plan_controller.crear_plan(datos)

    assert status_code == 422
    mock_dependencies['plan_model'].create.assert_not_called()

def test_crear_planes_masivo(plan_controller, mock_dependencies):
    mock_dependencies['material_model'].find_all.return_value = {'success': True, 'data': [
        {'id': 'pt-1', 'material_name': 'Chorizo', 'type': 'Producto Terminado'}
    ]}
    mock_dependencies['plan_model'].create_many.return_value = {'success': True, 'data': [{'id': 'a'}, {'id': 'b'}]}

    response, status_code = plan_controller.crear_planes([
        {'material_id': 'pt-1', 'planned_quantity': 10, 'planned_date': '2024-06-01'},
        {'material_id': 'pt-1', 'planned_quantity': 20, 'planned_date': '2024-06-02'},
    ])

    assert status_code == 201
    assert len(response['data']) == 2

def test_eliminar_plan(plan_controller, mock_dependencies):
    mock_dependencies['plan_model'].find_by_id.return_value = {'success': True, 'data': {'id': 'p-1'}}
    mock_dependencies['plan_model'].delete.return_value = {'success': True}

    _, status_code = plan_controller.eliminar_plan('p-1')

    assert status_code == 200
