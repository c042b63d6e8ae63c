"""Stitch Prompt Optimizer CLI"""
