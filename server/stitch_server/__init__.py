"""Stitch Prompt Optimizer server package"""
