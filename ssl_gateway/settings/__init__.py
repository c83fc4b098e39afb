import os

# =====================================================
# 🌍 Detect current environment
# =====================================================
env = os.getenv("DJANGO_ENV", "local").lower()

# =====================================================
# 🧩 Load settings file based on environment
# =====================================================
if env == "production":
    from .production import *
elif env == "staging":
    from .staging import *
else:
    from .local import *
