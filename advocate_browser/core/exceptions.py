class AdvocateBrowserError(Exception):
    """Base exception for all advocate_browser errors"""
    pass

class ConfigError(AdvocateBrowserError):
    """Invalid or inconsistent global.json / environment overrides"""
    pass

class RecordSchemaError(AdvocateBrowserError):
    """
    Payload doesn't match what Advocate expects:
    missing envelope, missing fields, wrong types, etc
    """
    pass

class AdvocateFetchError(AdvocateBrowserError):
    """The advocates endpoint could not be read (network, status or payload)"""
    pass
