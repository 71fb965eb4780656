#!/usr/bin/env python
"""
ShaderLab — Root-level launcher
"""

import sys
from pathlib import Path

# Add project root to sys.path so shaderlab is importable without installing
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from shaderlab.main import main

if __name__ == "__main__":
    main()
