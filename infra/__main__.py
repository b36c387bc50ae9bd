import pulumi
from pulumi import export

from config import SiteConfig, warn_defaults
from infra import create_site

# Read the configuration for this stack.
site_config = SiteConfig.from_pulumi_config(pulumi.Config())
warn_defaults(site_config)

site = create_site(site_config)

# Export the URLs and hostnames of the bucket and CDN.
export('originURL', site.origin_url)
export('originHostname', site.origin_hostname)
export('cdnURL', site.cdn_url)
export('cdnHostname', site.cdn_hostname)
