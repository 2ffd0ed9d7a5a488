import pytest
from app import create_app
import os
import tempfile


class ManualTimer:
    """Autosave timer that never fires on its own; writes happen on flush."""

    def __init__(self, interval, function):
        self.interval = interval
        self.function = function

    def start(self):
        pass

    def cancel(self):
        pass


@pytest.fixture
def client():
    # Create a temporary file to isolate the database for each test session
    db_fd, db_path = tempfile.mkstemp()

    # Configure app for testing
    app = create_app({
        'TESTING': True,
        'DATABASE': db_path,
        'SECRET_KEY': 'dev-key-for-testing',
        'WTF_CSRF_ENABLED': False,
        'AUTOSAVE_TIMER_FACTORY': ManualTimer,
    })

    with app.test_client() as client:
        yield client

    # Cleanup
    app.extensions['profile_store'].close()
    os.close(db_fd)
    os.unlink(db_path)


def test_root_redirects_to_login(client):
    rv = client.get('/')
    assert rv.status_code == 302
    assert rv.headers['Location'].endswith('/login')


def test_login_page_loads(client):
    rv = client.get('/login')
    assert rv.status_code == 200
    assert b'DOCTYPE html' in rv.data
    assert b'TGREC Soil Profiles' in rv.data


def test_pages_load_after_guest_login(client):
    rv = client.post('/login/guest', follow_redirects=True)
    assert rv.status_code == 200
    assert b'Shallow Pit / Auger Bore Examination' in rv.data

    assert client.get('/sheet2').status_code == 200
    rv = client.get('/summary/')
    assert rv.status_code == 200
    assert b'No Data Found' in rv.data
