"""Human-readable rendering of host check results."""

from webcheck.models import HostCheckResult


def format_result(result: HostCheckResult) -> str:
    """Render one result as tab-aligned "key:<TAB>value" lines.

    Resolved hosts end with a trailing newline so that printed results
    are separated by a blank line.
    """
    if result.error is not None:
        return f"name:\t{result.name}\nerror:\tcould not resolve: {result.error}"

    if result.open_ports:
        status = "server is up"
        ports_info = ", ".join(result.open_ports)
    else:
        status = "server may be down"
        ports_info = "no known HTTP(S) ports listening"

    return (
        f"name:\t{result.name}\n"
        f"ips:\t{', '.join(result.addresses)}\n"
        f"status:\t{status}\n"
        f"ports:\t{ports_info}\n"
    )


def format_results(results: list[HostCheckResult]) -> str:
    """Render several results, one block per host, plus a summary line."""
    blocks = [format_result(r) for r in results]
    up = sum(1 for r in results if r.is_up)
    blocks.append(f"{up}/{len(results)} hosts up")
    return "\n".join(blocks)
