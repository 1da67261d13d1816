# dubins_tour/planning/__init__.py
