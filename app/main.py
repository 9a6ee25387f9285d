from dotenv import load_dotenv

# Environment from .env must be in place before settings are created
load_dotenv()

from server import server  # noqa: E402 pylint: disable=wrong-import-position

server_app = server.handler
