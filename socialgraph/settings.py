import os

# Build paths inside the project like this: os.path.join(BASE_DIR, ...)
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


# Quick-start development settings - unsuitable for production
# See https://docs.djangoproject.com/en/stable/howto/deployment/checklist/

# SECURITY WARNING: keep the secret key used in production secret!
# The sticky form cookie is signed with this key.
SECRET_KEY = os.environ.get('SOCIALGRAPH_SECRET_KEY', '(ch@ngeMe)')

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = os.environ.get('SOCIALGRAPH_DEBUG', '') == '1'

ALLOWED_HOSTS = ['*']


# Application definition

INSTALLED_APPS = [
    'entity',
    'relationship',
    'acl',
    'user',
    'group.apps.GroupConfig',
    'livesearch',
    'api_v1',
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    'rest_framework',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
    'socialgraph.lib.middleware.ContextMiddleware',
]

ROOT_URLCONF = 'socialgraph.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

WSGI_APPLICATION = 'socialgraph.wsgi.application'

DEFAULT_AUTO_FIELD = 'django.db.models.AutoField'


# Database
# https://docs.djangoproject.com/en/stable/ref/settings/#databases

if os.environ.get('SOCIALGRAPH_DB_ENGINE') == 'mysql':
    import pymysql

    pymysql.install_as_MySQLdb()

    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.mysql',
            'NAME': os.environ.get('SOCIALGRAPH_DB_NAME', 'socialgraph'),
            'USER': os.environ.get('SOCIALGRAPH_DB_USER', 'root'),
            'PASSWORD': os.environ.get('SOCIALGRAPH_DB_PASSWORD', ''),
            'HOST': os.environ.get('SOCIALGRAPH_DB_HOST', 'localhost'),
        }
    }
else:
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': os.path.join(BASE_DIR, 'db.sqlite3'),
        }
    }


# Password validation
# https://docs.djangoproject.com/en/stable/ref/settings/#auth-password-validators

AUTH_PASSWORD_VALIDATORS = [
    {
        'NAME': 'django.contrib.auth.password_validation.UserAttributeSimilarityValidator',
    },
    {
        'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator',
    },
    {
        'NAME': 'django.contrib.auth.password_validation.CommonPasswordValidator',
    },
    {
        'NAME': 'django.contrib.auth.password_validation.NumericPasswordValidator',
    },
]


# Internationalization
# https://docs.djangoproject.com/en/stable/topics/i18n/

LANGUAGE_CODE = 'en-us'

TIME_ZONE = 'UTC'

USE_I18N = True

USE_TZ = True


# Static files (CSS, JavaScript, Images)
# https://docs.djangoproject.com/en/stable/howto/static-files/

STATIC_URL = '/static/'


REST_FRAMEWORK = {
    'DEFAULT_RENDERER_CLASSES': (
        'rest_framework.renderers.JSONRenderer',
    ),
}


# global settings for SocialGraph
SOCIALGRAPH = {
    'ENABLE_PROFILE': os.environ.get('SOCIALGRAPH_ENABLE_PROFILE', '') == '1',
    'ENABLE_GROUPS': True,
    'LIVESEARCH_MAX_LIMIT': 50,
    'ENTITY_CACHE_TIMEOUT': 300,
    'STICKY_FORM': {
        'COOKIE_NAME': 'socialgraphStickyForm',
        'SALT': 'socialgraph.sticky',
        'SET_MAX_AGE': 60 * 60,
        'CLEAR_MAX_AGE': 60,
    },
}


if os.environ.get('SOCIALGRAPH_MEMCACHED'):
    CACHES = {
        'default': {
            'BACKEND': 'django.core.cache.backends.memcached.PyMemcacheCache',
            'LOCATION': os.environ['SOCIALGRAPH_MEMCACHED'],
            'TIMEOUT': None,
        }
    }
else:
    CACHES = {
        'default': {
            'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
            'TIMEOUT': None,
        }
    }

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'default': {
            'format': '[%(asctime)s] %(levelname)s %(name)s: %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'default',
        },
    },
    'loggers': {
        app: {
            'handlers': ['console'],
            'level': os.environ.get('SOCIALGRAPH_LOG_LEVEL', 'INFO'),
        } for app in ['socialgraph', 'entity', 'relationship', 'acl', 'user', 'group',
                      'livesearch', 'api_v1']
    },
}
