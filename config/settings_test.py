from .settings import *

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

STORAGES = {
    'default': {'BACKEND': 'django.core.files.storage.FileSystemStorage'},
    'staticfiles': {'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage'},
}

APP_ENV = 'test'
SESSION_TOKEN_SECRET = 'test-session-secret'
SESSION_TOKEN_MAX_AGE = 24 * 60 * 60
ADMIN_USERNAME = 'admin'
ADMIN_PASSWORD_MODE = 'plain'
ADMIN_PASSWORD = 'correct-horse'
ADMIN_PASSWORD_HASH = ''

CORS_ALLOWED_ORIGINS = [
    'https://dubai-rose.vercel.app',
    'https://dubai-rose-spa.vercel.app',
    'http://localhost:3000',
    'http://localhost:5173',
]

LOGGING['root']['level'] = 'CRITICAL'
