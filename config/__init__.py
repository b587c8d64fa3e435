# Configuration Package
from config.classifier_config import ClassifierConfig

__all__ = ['ClassifierConfig']
