"""
Lambda handlers package for AWS Lambda functions.
"""
from .meal_plan import handler, grocery_list_handler

__all__ = ["handler", "grocery_list_handler"]
