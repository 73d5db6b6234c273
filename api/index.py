# api/index.py
from assistant import Settings, configure_logging, create_app

# Vercel will automatically find this 'app' variable.
# vercel.json rewrites /api/assistant here; Flask still routes on the original path.
settings = Settings.from_env()
configure_logging(settings.log_level)
app = create_app(settings)
