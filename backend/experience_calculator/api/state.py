from typing import Dict
from experience_calculator.session import ExperienceSession

# Maintain a registry of session_id -> ExperienceSession (process memory only)
SESSIONS: Dict[str, ExperienceSession] = {}
