"""
Recommendation proxy backend.

Forwards prompts from the frontend to Google Gemini and relays the generated
text back as JSON.
"""

__version__ = "0.1.0"
