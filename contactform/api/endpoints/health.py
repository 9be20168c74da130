from fastapi import APIRouter, Depends
from contactform.core.config import REQUIRED_EMAILJS_VARS, Settings, get_settings

router = APIRouter()


@router.get("/health")
def health_check(settings: Settings = Depends(get_settings)):
    """
    Health check endpoint.

    Reports which EmailJS variables are set, never their values.
    """
    missing = set(settings.missing_credentials())
    return {
        "status": "ok",
        "env_vars": {var: var not in missing for var in REQUIRED_EMAILJS_VARS},
    }
