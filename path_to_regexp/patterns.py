"""Regex patterns for template tokenizing."""

import re

# Pattern matching expressions
param_pattern = re.compile(r"(?P<slash>/)?(?P<format>\.)?:(?P<name>\w+)")
modifier_pattern = re.compile(r"(?P<star>\*)?(?P<optional>\?)?")
