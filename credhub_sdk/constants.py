import os

from dotenv import load_dotenv

load_dotenv(dotenv_path=".env")

# Service Constants
CREDHUB_CONNECT_TIMEOUT = float(os.getenv("CREDHUB_CONNECT_TIMEOUT", "10"))
CREDHUB_READ_TIMEOUT = float(os.getenv("CREDHUB_READ_TIMEOUT", "30"))

# API Paths
API_V1_PATH = "/api/v1"
DATA_URL_PATH = f"{API_V1_PATH}/data"
REGENERATE_URL_PATH = f"{API_V1_PATH}/regenerate"
PERMISSIONS_URL_PATH = f"{API_V1_PATH}/permissions"
INTERPOLATE_URL_PATH = f"{API_V1_PATH}/interpolate"

# OAuth2 Constants
OAUTH2_TOKEN_EXPIRY_BUFFER_SECONDS = int(
    os.getenv("CREDHUB_OAUTH2_TOKEN_EXPIRY_BUFFER_SECONDS", "30")
)

# TLS Constants
# Instance identity credentials provisioned by the platform for mutual TLS
CF_INSTANCE_CERT = os.getenv("CF_INSTANCE_CERT", "")
CF_INSTANCE_KEY = os.getenv("CF_INSTANCE_KEY", "")
SSL_CERT_DIR = os.getenv("CREDHUB_SSL_CERT_DIR", "")

# Logger Constants
SERVICE_NAME: str = os.getenv("CREDHUB_SDK_SERVICE_NAME", "credhub-sdk")
