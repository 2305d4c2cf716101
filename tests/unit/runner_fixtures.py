"""Helpers shared by tests that fake the runner and the Delino backend."""

import json

import requests


def make_response(status_code=200, payload=None, text=None):
    """Build a real requests.Response carrying a JSON (or raw text) body."""
    response = requests.Response()
    response.status_code = status_code
    response.encoding = "utf-8"
    if text is None:
        text = json.dumps(payload if payload is not None else {})
    response._content = text.encode("utf-8")
    return response


def read_file_commands(path):
    """Parse ``name<<delimiter`` blocks written by ActionIO into a dict."""
    values = {}
    lines = path.read_text(encoding="utf-8").split("\n")
    i = 0
    while i < len(lines):
        line = lines[i]
        if "<<" in line:
            name, delimiter = line.split("<<", 1)
            i += 1
            body = []
            while lines[i] != delimiter:
                body.append(lines[i])
                i += 1
            values[name] = "\n".join(body)
        i += 1
    return values
