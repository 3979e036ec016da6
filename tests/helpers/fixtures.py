"""TOML documents shared by the envpick tests."""
from __future__ import annotations

# dev and prod environments
BASIC_CONFIG = """
[dev]
API_URL = "http://localhost:3000"
DB_HOST = "localhost"
DEBUG = "true"

[prod]
API_URL = "https://api.example.com"
DB_HOST = "prod-db.example.com"
DEBUG = "false"
"""

# default and db namespaces
NAMESPACE_CONFIG = """
[dev]
API_URL = "http://localhost:3000"
ENV = "development"

[prod]
API_URL = "https://api.example.com"
ENV = "production"

[db.local]
DB_HOST = "localhost"
DB_PORT = "5432"
DB_NAME = "myapp_dev"

[db.prod]
DB_HOST = "prod-db.example.com"
DB_PORT = "5432"
DB_NAME = "myapp_prod"
"""

# _web_url metadata
METADATA_CONFIG = """
[dev]
API_URL = "http://localhost:3000"
_web_url = "http://localhost:3000/admin"

[prod]
API_URL = "https://api.example.com"
_web_url = "https://api.example.com/admin"

[staging]
API_URL = "https://staging.example.com"
"""

# several namespaces, one written with a quoted dotted key
MULTI_NAMESPACE_CONFIG = """
[dev]
ENV = "development"

[prod]
ENV = "production"

[db.local]
DB_HOST = "localhost"

[db.prod]
DB_HOST = "prod-db.example.com"

[deploy.aws]
CLOUD = "aws"
REGION = "us-east-1"

["deploy.gcp"]
CLOUD = "gcp"
REGION = "us-central1"
"""

INVALID_CONFIG = """
[dev
API_URL = "broken
"""

LEGACY_STATE = 'current_config = "dev"\n'

NEW_STATE_MULTI = """
[current]
"" = "prod"
db = "local"
"""
