"""Vulture whitelist for false positives.

This file contains code that vulture incorrectly flags as unused
but is actually used by frameworks (Pydantic) that static analysis cannot detect.
"""
# pylint: disable=all
# Pydantic field validators - used by framework via @field_validator decorator
_.parse_string_set  # noqa: F821  # unused method (typofix/core/config.py:71)
_.expand_paths  # noqa: F821  # unused method (typofix/core/config.py:81)

# Pydantic model validator - used by framework via @model_validator decorator
_.validate_cross_fields  # noqa: F821  # unused method (typofix/core/config.py:85)

# Pydantic model_config class variable - read by framework at class definition time
model_config  # noqa: F821  # unused variable (typofix/core/config.py:17)

# Pydantic hook - called by the framework after __init__
_.model_post_init  # noqa: F821  # unused method (typofix/processing/dictionary_loading.py:44)

# Multiprocessing pool initializer and worker - passed by reference to Pool
init_worker  # unused function (typofix/processing/batch.py:14)
correct_line_worker  # unused function (typofix/processing/batch.py:19)

# Public library API - imported by users, not by the package itself
correct_text  # unused function (typofix/core/engine.py)
_.is_numeric  # noqa: F821  # unused property (typofix/core/tokens.py)
