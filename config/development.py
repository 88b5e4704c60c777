import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Apps Script web-app URL of the attendance spreadsheet
API_ENDPOINT = os.getenv("API_ENDPOINT", "http://localhost:8080/exec")

REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "15"))
DELETE_ALL_TIMEOUT = float(os.getenv("DELETE_ALL_TIMEOUT", "30"))

LOCAL_STORE_PATH = os.getenv("LOCAL_STORE_PATH", "instance/local_store.json")

# Status of a student left unmarked on the daily sheet; empty = nothing assumed
UNMARKED_STATUS_DEFAULT = os.getenv("UNMARKED_STATUS_DEFAULT", "Hadir")

DEFAULT_PLACE_NAME = os.getenv("DEFAULT_PLACE_NAME", "Makassar")

DEBUG = True
