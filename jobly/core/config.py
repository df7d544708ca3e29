import os

# ✅ Environment
ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
PORT = int(os.getenv("PORT", "3001"))

# ✅ Database
DATABASE_URL = os.getenv("DATABASE_URL", "postgresql://localhost/jobly")
RUN_MIGRATIONS = os.getenv("RUN_MIGRATIONS", "0") == "1"

# ✅ Security
SECRET_KEY = os.getenv("SECRET_KEY", "secret-dev")
ALGORITHM = os.getenv("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))

# Speed up bcrypt during tests, since the algorithm safety isn't being tested
BCRYPT_WORK_FACTOR = int(
    os.getenv("BCRYPT_WORK_FACTOR", "4" if ENVIRONMENT == "test" else "12")
)
