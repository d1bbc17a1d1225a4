"""CDK constructs for static website infrastructure."""

from .certificate import DnsValidatedCertificate
from .distribution import EdgeDistribution
from .dns import DnsRecords
from .publisher import AssetPublisher, resolve_asset_dir
from .static_site import StaticWebsite
from .storage import ContentBucket

__all__ = [
  "AssetPublisher",
  "ContentBucket",
  "DnsRecords",
  "DnsValidatedCertificate",
  "EdgeDistribution",
  "StaticWebsite",
  "resolve_asset_dir",
]
