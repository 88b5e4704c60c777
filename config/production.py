import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

API_ENDPOINT = os.getenv("API_ENDPOINT", "")

REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "15"))
DELETE_ALL_TIMEOUT = float(os.getenv("DELETE_ALL_TIMEOUT", "30"))

LOCAL_STORE_PATH = os.getenv("LOCAL_STORE_PATH", "instance/local_store.json")

UNMARKED_STATUS_DEFAULT = os.getenv("UNMARKED_STATUS_DEFAULT", "Hadir")

DEFAULT_PLACE_NAME = os.getenv("DEFAULT_PLACE_NAME", "Makassar")

DEBUG = False
