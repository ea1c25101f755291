import app
from core import config


def test_app_reads_settings_from_config():
    assert app.LOG_LEVEL == config.LOG_LEVEL
    assert app.LOG_FILE == config.LOG_FILE
    assert app.POLLING_ENABLED is config.POLLING_ENABLED
    assert not hasattr(app, 'load_dotenv')
