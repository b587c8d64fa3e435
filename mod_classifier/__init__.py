# Mod Classifier Package
from mod_classifier.mod_category import ModCategory
from mod_classifier.mod_file import ModFile
from mod_classifier.name_normalizer import NameNormalizer, normalize, normalize_with_trace
from mod_classifier.catalog import Catalog, CatalogEntry, ensure_catalog_file
from mod_classifier.classifier import ModClassifier, ClassificationResult
from mod_classifier.classifier_logger import ClassifierLogger
from mod_classifier.errors import ModClassifierError, OutputSetupError, InputFolderError, CatalogFileError
from mod_classifier.path_utils import get_app_dir
from mod_classifier.version import __version__

__all__ = [
    'ModCategory',
    'ModFile',
    'NameNormalizer',
    'normalize',
    'normalize_with_trace',
    'Catalog',
    'CatalogEntry',
    'ensure_catalog_file',
    'ModClassifier',
    'ClassificationResult',
    'ClassifierLogger',
    'ModClassifierError',
    'OutputSetupError',
    'InputFolderError',
    'CatalogFileError',
    'get_app_dir',
    '__version__'
]
