# socialnet_client/api.py

import os
import requests
from dotenv import load_dotenv


load_dotenv()

# Base URL of the socialnet backend
SOCIALNET_API_URL = os.getenv("SOCIALNET_API_URL", "http://localhost:8800")


def _error(res):
    try:
        data = res.json()
    except ValueError:
        return {"status": "error", "status_code": res.status_code, "message": res.text}
    if isinstance(data, dict):
        message = data.get("detail", data.get("message", f"Status {res.status_code}"))
    else:
        message = str(data)
    return {"status": "error", "status_code": res.status_code, "message": message}


def _result(res):
    if res.status_code != 200:
        return _error(res)
    try:
        return res.json()
    except ValueError:
        return {"status": "error", "status_code": res.status_code, "message": "Invalid JSON in response"}


# -------------------------------
# Authentication-related functions
# -------------------------------

def register_user(username, email, password):
    """
    Registers a new account and returns the stored user (id, username, email).
    """
    try:
        res = requests.post(
            f"{SOCIALNET_API_URL}/api/auth/register",
            json={"username": username, "email": email, "password": password},
        )
    except requests.RequestException as e:
        return {"status": "error", "message": str(e)}
    return _result(res)


def login_user(email, password):
    """
    Checks the credentials and returns the matching user.
    """
    try:
        res = requests.post(
            f"{SOCIALNET_API_URL}/api/auth/login",
            json={"email": email, "password": password},
        )
    except requests.RequestException as e:
        return {"status": "error", "message": str(e)}
    return _result(res)


def get_health():
    try:
        res = requests.get(f"{SOCIALNET_API_URL}/api/health")
        return res.json()
    except requests.RequestException as e:
        return {"status": "error", "message": str(e)}
    except ValueError:
        return {"status": "error", "message": f"Status {res.status_code}"}
