"""
MaMa - a personal health journal for meals, workouts, pumping sessions and more.
"""
__version__ = "0.1.0"
