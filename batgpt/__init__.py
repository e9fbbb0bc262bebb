"""batgpt - solve CodingBat exercises with OpenAI and submit them for many accounts."""

__version__ = "0.1.0"
