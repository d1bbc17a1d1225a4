"""Exceptions raised while building the website resource graph."""


class ConfigurationError(ValueError):
  """Site configuration is invalid or inconsistent."""


class AssetSourceNotFoundError(FileNotFoundError):
  """The local asset directory is missing or holds no files."""
