"""
Top-level package for the European Philosophical Atlas.

Most code should import from submodules such as:
    philo_atlas.core
    philo_atlas.views
    philo_atlas.ui
"""

__all__: list[str] = []
