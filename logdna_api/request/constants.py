"""Wire constants for LogDNA API requests."""

from http import HTTPStatus


SERVICE_KEY_HEADER = "Servicekey"
CONTENT_TYPE_HEADER = "Content-Type"
JSON_CONTENT_TYPE = "application/json"

# Only an exact 200 counts as success
HTTP_STATUS_OK = HTTPStatus.OK

DEFAULT_HOST = "https://api.logdna.com"
DEFAULT_TIMEOUT_SECONDS = 15.0

# Chunk size for draining response streams
DEFAULT_CHUNK_SIZE = 8192
