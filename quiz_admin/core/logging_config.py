import logging
import logging.config

from quiz_admin.core.config import settings


class UserFilter(logging.Filter):
    def filter(self, record):
        if not hasattr(record, 'user'):
            record.user = 'SYSTEM'  # default actor when none is passed via extra
        return True


def build_logging_config(level: str = settings.LOG_LEVEL) -> dict:
    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'standard': {
                'format': '%(asctime)s - %(name)s - %(levelname)s - %(user)s - %(message)s'
            },
        },
        'filters': {
            'user_filter': {
                '()': UserFilter,
            },
        },
        'handlers': {
            'console': {
                'level': level,
                'class': 'logging.StreamHandler',
                'formatter': 'standard',
                'filters': ['user_filter']
            },
        },
        'loggers': {
            'services': {
                'handlers': ['console'],
                'level': level,
                'propagate': False,
            },
            'api': {
                'handlers': ['console'],
                'level': level,
                'propagate': False,
            },
            'infrastructure': {
                'handlers': ['console'],
                'level': level,
                'propagate': False,
            },
        }
    }


def setup_logging(level: str = settings.LOG_LEVEL) -> None:
    logging.config.dictConfig(build_logging_config(level))
