"""
Color utilities for terminal output.
"""

class Colors:
    """ANSI color codes for terminal output."""
    
    CYAN = '\033[96m'
    BRIGHT_RED = '\033[1;91m'
    BRIGHT_GREEN = '\033[1;92m'
    BRIGHT_BLUE = '\033[1;94m'
    
    # Reset
    RESET = '\033[0m'

def colorize(text: str, color: str) -> str:
    """Apply color to text."""
    return f"{color}{text}{Colors.RESET}"

def step(text: str) -> str:
    return colorize(f"[STEP] {text}", Colors.BRIGHT_BLUE)

def success(text: str) -> str:
    return colorize(f"[SUCCESS] {text}", Colors.BRIGHT_GREEN)

def error(text: str) -> str:
    return colorize(f"[ERROR] {text}", Colors.BRIGHT_RED)

def info(text: str) -> str:
    return colorize(f"[INFO] {text}", Colors.CYAN)
