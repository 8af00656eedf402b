import pytest
from flashdeck import create_app, db


@pytest.fixture()
def app_instance(tmp_path):
    test_db = tmp_path / 'test.db'
    app = create_app({
        'TESTING': True,
        'SECRET_KEY': 'test-secret',
        'SQLALCHEMY_DATABASE_URI': f'sqlite:///{test_db}',
        # keep hashing cheap in tests
        'PASSWORD_HASH_METHOD': 'pbkdf2:sha256:1000',
    })
    with app.app_context():
        db.drop_all(); db.create_all()
    yield app
    with app.app_context():
        db.session.remove()
        db.engine.dispose()


@pytest.fixture()
def client(app_instance):
    return app_instance.test_client()


@pytest.fixture()
def register(client):
    def _register(username='u1', password='pw'):
        r = client.post('/register', json={'username': username, 'password': password})
        assert r.status_code == 200
        return {'x-auth-token': r.get_json()['token']}
    return _register
