#!/usr/bin/env python3
"""Runner mínimo para el 'bombo' interactivo.

Ejemplo:
  python run_bombo.py --seed 42 --no-animation

"""
import sys

from bombo.app import main

if __name__ == '__main__':
    sys.exit(main())
