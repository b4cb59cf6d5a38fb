"""
Pytest configuration for seaport_approvals tests.
"""
import sys
import os

# Make `import seaport_approvals` work without installing the package
_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
_SRC_DIR = os.path.join(_ROOT, 'src')

if _SRC_DIR not in sys.path:
	sys.path.insert(0, _SRC_DIR)
