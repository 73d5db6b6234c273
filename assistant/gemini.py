"""Single call to the Gemini generateContent endpoint."""

import logging

import requests

GEMINI_API_BASE = "https://generativelanguage.googleapis.com/v1beta/models"

logger = logging.getLogger(__name__)


def generate_content_url(model):
    return f"{GEMINI_API_BASE}/{model}:generateContent"


def build_payload(question, system_prompt):
    """Construct the request body for the Google API."""
    return {
        "contents": [{"parts": [{"text": question}]}],
        "systemInstruction": {"parts": [{"text": system_prompt}]},
    }


def redact(text, secret):
    """Hide the API key in anything headed for the logs (URLs carry it as ?key=)."""
    text = str(text)
    if secret:
        text = text.replace(secret, "***")
    return text


def call_gemini_api(api_key, model, payload, post=None, logger=logger):
    """
    Forwards the payload to Gemini with the server's key and returns
    the decoded JSON response untouched.

    Raises requests.HTTPError on a non-2xx status; network and JSON
    decoding errors propagate as raised by requests.
    """
    if post is None:
        post = requests.post

    headers = {'Content-Type': 'application/json'}
    url = f"{generate_content_url(model)}?key={api_key}"

    logger.debug("Calling Gemini model %s", model)
    response = post(url, headers=headers, json=payload)
    logger.debug("Gemini responded with status %s", response.status_code)

    if not response.ok:
        # Keep the upstream detail on the server, the caller only gets a generic error
        logger.error(
            "Google API Error (status %s): %s",
            response.status_code,
            redact(response.text, api_key),
        )
    response.raise_for_status()

    return response.json()
