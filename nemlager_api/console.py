"""
Console logging helpers.

Colored output for the runner and for diagnostics logged by test cases.
"""


class Colors:
    GREEN = '\033[92m'
    RED = '\033[91m'
    BLUE = '\033[94m'
    CYAN = '\033[96m'
    YELLOW = '\033[93m'
    END = '\033[0m'


def log_pass(name):
    print(f"  {Colors.GREEN}✅ {name}{Colors.END}")


def log_fail(name, error):
    print(f"  {Colors.RED}❌ {name}: {error}{Colors.END}")


def log_skip(name, reason):
    print(f"  {Colors.YELLOW}⏭️  {name}: {reason}{Colors.END}")


def log_section(name):
    print(f"\n{Colors.BLUE}▶ {name}{Colors.END}")


def log_info(message):
    print(f"  {Colors.CYAN}ℹ️  {message}{Colors.END}")
