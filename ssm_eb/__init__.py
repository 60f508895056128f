"""
SSM to Elastic Beanstalk Utility

A tool for fetching parameters from AWS Systems Manager Parameter Store and
rendering them as Elastic Beanstalk option settings, or for storing them back.
"""

from .config_loader import ParameterSet, ParameterSpec, load_parameters
from .executor import get_option_settings, run, set_parameters
from .output import OutputDocument, OutputOption
from .store import ParameterStore

__version__ = '0.1.0'
__all__ = [
    'OutputDocument',
    'OutputOption',
    'ParameterSet',
    'ParameterSpec',
    'ParameterStore',
    'get_option_settings',
    'load_parameters',
    'run',
    'set_parameters',
]
