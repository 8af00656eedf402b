from __future__ import annotations
import logging
import os

from dotenv import load_dotenv

# .env must be loaded before the factory reads the environment
load_dotenv()

from flashdeck import create_app  # noqa: E402

logging.basicConfig(
    level=os.getenv('LOG_LEVEL', 'INFO').upper(),
    format='%(asctime)s %(levelname)s [%(name)s] %(message)s',
)

app = create_app()

if __name__ == '__main__':
    port = int(os.getenv('PORT', '5000'))
    app.logger.info("Server running on port %s", port)
    app.run(host='0.0.0.0', port=port)
