#run it with uvicorn contactform.main:app --reload
from fastapi import FastAPI
from dotenv import load_dotenv
import logging

# Load environment variables from .env file
load_dotenv()

from contactform.api.api_router import api_router
from contactform.core.config import get_settings

# Set up logging
logging.basicConfig(
    level=get_settings().log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

app = FastAPI(title="Contact Form Backend", version="1.0.0")

# CORS headers are set per response by the contact endpoint
app.include_router(api_router)
