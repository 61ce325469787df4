"""
Scaffold configuration module for managing run settings.
"""

class ScaffoldConfig:
    """Configuration class for spec scaffolding settings."""
    
    def __init__(self):
        self.import_resolution = 'text'
        self.spy_import = 'autoSpy'
        self.indent = '\t'
        self.spec_file_path = None
    
    def set_import_resolution(self, mode: str):
        """Set how constructor dependency imports are resolved ('text' or 'tree')."""
        self.import_resolution = mode
    
    def get_import_resolution(self) -> str:
        """Get the import resolution mode."""
        return self.import_resolution
    
    def set_spy_import(self, module: str):
        """Set the module autoSpy is imported from."""
        self.spy_import = module
    
    def get_spy_import(self) -> str:
        """Get the module autoSpy is imported from."""
        return self.spy_import
    
    def set_indent(self, indent: str):
        """Set the indentation unit of generated specs."""
        self.indent = indent
    
    def get_indent(self) -> str:
        """Get the indentation unit of generated specs."""
        return self.indent
    
    def set_spec_file_path(self, path: str):
        """Set the path of the last written spec file."""
        self.spec_file_path = path
    
    def get_spec_file_path(self) -> str:
        """Get the path of the last written spec file."""
        return self.spec_file_path

# Create a singleton instance
_config = ScaffoldConfig()

# Export all methods and attributes from the singleton instance
set_import_resolution = _config.set_import_resolution
get_import_resolution = _config.get_import_resolution
set_spy_import = _config.set_spy_import
get_spy_import = _config.get_spy_import
set_indent = _config.set_indent
get_indent = _config.get_indent
set_spec_file_path = _config.set_spec_file_path
get_spec_file_path = _config.get_spec_file_path
