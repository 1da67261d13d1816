# dubins_tour/visualization/__init__.py
