"""
UrlFilter -- Post-extraction filtering and corpus statistics.

- Drops matches whose host equals, or is a subdomain of, an ignored
  domain (case-insensitive)
- Drops single-label hosts ("localhost") unless non-FQDN hosts are
  included; the matcher applies the same policy, this is the second
  line of defence for externally supplied results
- Never removes a file entry, only matches inside it
- Statistics are recomputed from the filtered set
"""

from typing import Iterable, List, Optional
from urllib.parse import urlsplit

from ..models import FileResult, ScanStats, UrlMatch


def extract_host(url: str) -> Optional[str]:
    """
    Lowercased host of a URL, or None if it has none.

    Example:
        extract_host("https://API.Example.com:8443/v1")  # "api.example.com"
    """
    try:
        return urlsplit(url).hostname
    except ValueError:
        return None


def normalize_domain(domain: str) -> str:
    """Normalize an ignore-list entry ("*.Example.com." -> "example.com")."""
    domain = domain.strip().lower()
    if domain.startswith("*."):
        domain = domain[2:]
    return domain.strip(".")


def is_fqdn(host: str) -> bool:
    """True if host has at least two dot-separated labels."""
    labels = [label for label in host.split(".") if label]
    return len(labels) >= 2


class UrlFilter:
    """
    Filters matches and computes statistics.

    Usage:
        url_filter = UrlFilter()
        filtered = url_filter.filter(results, ["example.com"], include_non_fqdn=False)
        stats = url_filter.compute_stats(filtered)
    """

    def filter(
        self,
        file_results: Iterable[FileResult],
        ignore_domains: Iterable[str] = (),
        include_non_fqdn: bool = False,
    ) -> List[FileResult]:
        """
        Filter matches in every file result.

        Args:
            file_results: Results to filter (not modified)
            ignore_domains: Domains whose hosts (and subdomains) are dropped
            include_non_fqdn: Keep single-label hosts

        Returns:
            New FileResult list, same files in the same order
        """
        ignored = tuple(
            domain for domain in (normalize_domain(d) for d in ignore_domains) if domain
        )

        return [
            FileResult(
                file=result.file,
                urls=[m for m in result.urls if self._keep(m, ignored, include_non_fqdn)],
            )
            for result in file_results
        ]

    def _keep(self, match: UrlMatch, ignored: tuple, include_non_fqdn: bool) -> bool:
        host = extract_host(match.url)
        if not host:
            return False

        for domain in ignored:
            if host == domain or host.endswith("." + domain):
                return False

        if not include_non_fqdn and not is_fqdn(host):
            return False

        return True

    def compute_stats(self, file_results: Iterable[FileResult]) -> ScanStats:
        """
        Count files, URLs and distinct URLs (exact, case-sensitive).
        """
        files = 0
        total = 0
        unique = set()
        for result in file_results:
            files += 1
            total += len(result.urls)
            unique.update(match.url for match in result.urls)
        return ScanStats(files_scanned=files, total_urls=total, unique_urls=len(unique))
