"""Munsell chart API"""
