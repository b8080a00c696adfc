import os
from dotenv import load_dotenv

load_dotenv()

API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:5000/api")

# offered in the "From" / "To" selectors
LANGUAGES = ["JavaScript", "Python", "Java", "C++", "Go", "TypeScript", "Ruby", "PHP"]
