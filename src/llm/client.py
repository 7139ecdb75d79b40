"""
Gemini Client Module

This module handles the optional Gemini client used by the language-model field
classifier. The keyword classifier works without it; the client is only
configured when USE_LLM_CLASSIFIER is enabled and GOOGLE_API_KEY is set.

Key Functions:
- configure_gemini_client(): reads GOOGLE_API_KEY and GEMINI_MODEL and builds the model
- get_generative_model(): the cached model, configuring it on first use
- reset_client(): forgets the cached model
- llm_classifier_enabled(): Whether the language-model classifier should be used

Global State:
- GENERATIVE_MODEL: the cached model, None until configured
"""

import logging
import os

import google.generativeai as genai
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_MODEL_NAME = "gemini-2.5-flash-lite"

GENERATIVE_MODEL = None


def configure_gemini_client():
    """
    Configures the Gemini model used by the classifier.

    Returns:
        bool: True once a model is available, False if the key is missing
        or the client could not be created
    """
    global GENERATIVE_MODEL
    if GENERATIVE_MODEL is not None:
        return True  # Already configured

    try:
        load_dotenv()
        api_key = os.getenv("GOOGLE_API_KEY")
        if not api_key:
            logger.error("GOOGLE_API_KEY not found in .env file or environment variables.")
            return False

        model_name = os.getenv("GEMINI_MODEL") or DEFAULT_MODEL_NAME
        logger.info(f"Initializing Gemini with model: {model_name}")

        genai.configure(api_key=api_key)
        GENERATIVE_MODEL = genai.GenerativeModel(model_name)
        return True
    except Exception as e:
        logger.error(f"Error configuring Gemini client: {e}")
        GENERATIVE_MODEL = None
        return False


def get_generative_model():
    """
    Returns the cached model, or None when Gemini cannot be configured.
    Callers treat None as "use the keyword classifier".
    """
    global GENERATIVE_MODEL
    if GENERATIVE_MODEL is None:
        if not configure_gemini_client():
            return None
    return GENERATIVE_MODEL


def reset_client():
    """Drops the cached model (API key rotation, tests)."""
    global GENERATIVE_MODEL
    GENERATIVE_MODEL = None


def llm_classifier_enabled() -> bool:
    load_dotenv()
    return os.getenv("USE_LLM_CLASSIFIER", "").lower() in ("1", "true", "yes")
