"""
Assertion steps package.
Provides the builders turning browser checks into deferred, named steps.
"""

from .models import (
    StepKind,
    StepMetadata,
    AssertionString,
    AssertionBool,
    AssertionInt,
    AssertionGeometry,
    AssertionMaybe,
    AssertionTask,
    AssertionWebdriver,
    Step
)
from .page import url, title, page_source, cookie, cookie_exists, cookie_not_exists
from .element import (
    element_count,
    attribute,
    css_property,
    element_html,
    element_text,
    element_value,
    exists,
    input_enabled,
    visible,
    visible_within_viewport,
    option_selected,
    element_size,
    element_position,
    element_view_position
)
from .composition import task, driver_command, sequence_commands

__all__ = [
    'StepKind',
    'StepMetadata',
    'AssertionString',
    'AssertionBool',
    'AssertionInt',
    'AssertionGeometry',
    'AssertionMaybe',
    'AssertionTask',
    'AssertionWebdriver',
    'Step',
    'url',
    'title',
    'page_source',
    'cookie',
    'cookie_exists',
    'cookie_not_exists',
    'element_count',
    'attribute',
    'css_property',
    'element_html',
    'element_text',
    'element_value',
    'exists',
    'input_enabled',
    'visible',
    'visible_within_viewport',
    'option_selected',
    'element_size',
    'element_position',
    'element_view_position',
    'task',
    'driver_command',
    'sequence_commands'
]
