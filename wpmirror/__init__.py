"""Mirror a WordPress blog into a JSON dataset and render it as a static site."""

__version__ = "0.1.0"
