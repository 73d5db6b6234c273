# main.py
import os

from assistant import Settings, configure_logging, create_app

# To run this:
# On Linux/macOS: export GEMINI_API_KEY="YOUR_API_KEY"
# On Windows: set GEMINI_API_KEY="YOUR_API_KEY"
# Then run: python main.py
# Set LOG_LEVEL=DEBUG to log every request and upstream status.
settings = Settings.from_env()
configure_logging(settings.log_level)
app = create_app(settings)

# The server will then be available at http://127.0.0.1:5001/api/assistant
if __name__ == '__main__':
    port = int(os.environ.get('PORT', 5001))
    # Note: `debug=True` is for development only. Do not use in production.
    app.run(host='0.0.0.0', port=port, debug=settings.log_level == 'DEBUG')
