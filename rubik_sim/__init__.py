# rubik_sim/__init__.py
"""Simulador de cubo Rubik 3x3: estado, movimientos, mezcla y reproducción de soluciones."""

__version__ = "0.1.0"
