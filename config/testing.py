import os

SECRET_KEY = "test-secret"

API_ENDPOINT = "http://testserver/exec"

REQUEST_TIMEOUT = 1
DELETE_ALL_TIMEOUT = 2

LOCAL_STORE_PATH = os.getenv("LOCAL_STORE_PATH", "instance/test_store.json")

UNMARKED_STATUS_DEFAULT = "Hadir"

DEFAULT_PLACE_NAME = "Makassar"

DEBUG = False
TESTING = True
