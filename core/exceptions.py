class ConfigValueError(ValueError):
    """
    A value could not be stored against a config option
    """
