# recaptcha3/config.py
from dotenv import load_dotenv
import os

load_dotenv(override=False)

class Config:
   # Secret key for sessions/cookies (CSRF tokens need it)
   SECRET_KEY = os.getenv('SECRET_KEY')

   # reCAPTCHA v3 configuration
   RECAPTCHA_SITE_KEY_V3 = os.environ.get('RECAPTCHA_SITE_KEY_V3')
   # Leave unset to use the google.com endpoint; set to
   # //www.recaptcha.net/recaptcha/api.js where google.com is blocked
   RECAPTCHA_JS_API_URL = os.environ.get('RECAPTCHA_JS_API_URL')

   # Rate limiting for the demo contact form
   CONTACT_RATE_LIMIT = os.getenv('CONTACT_RATE_LIMIT', '5 per hour')

   # Site configuration
   SITE_NAME = "reCAPTCHA v3 widget demo"

   # Development vs Production
   DEBUG = os.getenv('FLASK_DEBUG', False)
