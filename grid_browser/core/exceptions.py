class GridBrowserError(Exception):
    """Base exception for all grid_browser errors"""
    pass

class ConfigError(GridBrowserError):
    """Invalid or inconsistent global.json or grid options"""
    pass

class FetchError(GridBrowserError):
    """
    The remote dataset could not be fetched or decoded:
    transport errors, non-2xx status, invalid JSON, payload not a list of records
    """
    pass
