# engine_py/src/bluff_engine/errors.py

class GameError(Exception):
    """Base exception for game-related errors."""
    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(f"[{code}] {message}")

# Specific error codes
INVALID_CONFIG = "INVALID_CONFIG"
AGENT_COUNT_MISMATCH = "AGENT_COUNT_MISMATCH"
INTERNAL_ERROR = "INTERNAL_ERROR"

# Helper function to raise common errors
def raise_error(code: str, message: str):
    raise GameError(code, message)
