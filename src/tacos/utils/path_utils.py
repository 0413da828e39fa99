"""Path normalization utilities for cross-platform compatibility."""


class PathUtils:
    """Utilities for consistent path handling across platforms."""
    
    @staticmethod
    def normalize_path(path: str) -> str:
        """
        Normalize path separators to forward slashes.
        
        Args:
            path: File path with potentially mixed separators
            
        Returns:
            Path with forward slashes only
        """
        return path.replace('\\\\', '/').replace('\\', '/')
    
    @staticmethod
    def join_relative(parent: str, name: str) -> str:
        """
        Append a name to a root-relative path.
        
        Args:
            parent: Root-relative parent path ('' for the root itself)
            name: Base name of the child
            
        Returns:
            Root-relative child path with forward slashes
        """
        if not parent:
            return name
        return f"{PathUtils.normalize_path(parent).rstrip('/')}/{name}"
