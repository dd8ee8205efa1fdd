"""
Labeled values: values paired with descriptive metadata, and named collections of them.
"""

from labeled_data.types import *
from labeled_data.errors import *
from labeled_data.config import *
from labeled_data.logging import *
from labeled_data.values import *
from labeled_data.factory import *
from labeled_data.collection import *
