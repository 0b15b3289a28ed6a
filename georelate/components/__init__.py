"""Geometry model, geometric kernel, topology graph and relate computation"""
