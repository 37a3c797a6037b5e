import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Optional

# Add parent directory to path so we can import src
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

import jwt
from src.config.settings import Config


def generate_jwt_token(
    user_id: str = "alice",
    role: str = "user",
    email: Optional[str] = None,
    expires_in: timedelta = timedelta(hours=1),
    secret: Optional[str] = None,
) -> str:
    """Generate a valid JWT token for testing API endpoints"""
    payload = {
        "sub": user_id,
        "role": role,
        "email": email or f"{user_id}@example.com",
        "exp": datetime.now(timezone.utc) + expires_in,
        "iat": datetime.now(timezone.utc),
    }
    if Config.JWT_ISSUER:
        payload["iss"] = Config.JWT_ISSUER
    if Config.JWT_AUDIENCE:
        payload["aud"] = Config.JWT_AUDIENCE

    token = jwt.encode(payload, secret or Config.JWT_SECRET, algorithm=Config.JWT_ALGORITHM)
    return token


if __name__ == "__main__":
    token = generate_jwt_token()
    print(f"Bearer {token}")
