"""
services/ - Application Logic
=============================
Routines that combine repositories. They receive their repositories
from the caller.
"""
