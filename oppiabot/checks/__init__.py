"""
Check registry: maps check names to check instances, in the order they run.

When adding a new feature, add a new entry here.
"""

from .template import TemplateCheck

CHECKS = {
    "template": TemplateCheck(),
}
