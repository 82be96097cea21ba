"""
Physical constants and simulation flags.
"""

# Gravitational acceleration acting on the falling beam source
GRAVITY_CM_S2 = 9.81e2  # cm/s²

# Debug flag
DEBUG = False
