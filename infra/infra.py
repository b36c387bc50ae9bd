from typing import NamedTuple

import pulumi
import pulumi_gcp as gcp
import pulumi_synced_folder as synced_folder
from pulumi import Output

from config import SiteConfig

BUCKET_LOCATION = 'US'
PUBLIC_READ_ROLE = 'roles/storage.objectViewer'
RECORD_TTL = 300


class Site(NamedTuple):
    bucket: gcp.storage.Bucket
    bucket_iam_binding: gcp.storage.BucketIAMBinding
    synced_folder: synced_folder.GoogleCloudFolder
    backend_bucket: gcp.compute.BackendBucket
    ip: gcp.compute.GlobalAddress
    zone: gcp.dns.GetManagedZoneResult
    dns_record: gcp.dns.RecordSet
    url_map: gcp.compute.URLMap
    http_proxy: gcp.compute.TargetHttpProxy
    http_forwarding_rule: gcp.compute.GlobalForwardingRule
    certificate: gcp.compute.ManagedSslCertificate
    https_proxy: gcp.compute.TargetHttpsProxy
    https_forwarding_rule: gcp.compute.GlobalForwardingRule

    @property
    def origin_url(self):
        return Output.concat('https://storage.googleapis.com/', self.bucket.name, '/index.html')

    @property
    def origin_hostname(self):
        return Output.concat('storage.googleapis.com/', self.bucket.name)

    @property
    def cdn_url(self):
        return Output.concat('http://', self.ip.address)

    @property
    def cdn_hostname(self):
        return self.ip.address


def create_site(config: SiteConfig, opts=None):
    """Declare the bucket, CDN, load balancer and DNS record for the site.

    The first exception raised by a declaration or by the zone lookup
    propagates and nothing after it is declared.
    """
    # Create a storage bucket and configure it as a website.
    bucket = gcp.storage.Bucket(
        config.bucket_name,
        location=BUCKET_LOCATION,
        website=gcp.storage.BucketWebsiteArgs(
            main_page_suffix=config.index_document,
            not_found_page=config.error_document,
        ),
        opts=opts)

    # Allow public read access to the bucket.
    bucket_iam_binding = gcp.storage.BucketIAMBinding(
        'bucket-iam-binding',
        bucket=bucket.name,
        role=PUBLIC_READ_ROLE,
        members=['allUsers'],
        opts=opts)

    # Use a synced folder to manage the files of the website.
    folder = synced_folder.GoogleCloudFolder(
        'synced-folder',
        path=config.path,
        bucket_name=bucket.name,
        opts=opts)

    # Enable the storage bucket as a CDN.
    backend_bucket = gcp.compute.BackendBucket(
        'backend-bucket',
        bucket_name=bucket.name,
        enable_cdn=True,
        opts=opts)

    # Provision a global IP address for the CDN.
    ip = gcp.compute.GlobalAddress('ip', opts=opts)

    # The zone must already exist, it is never created here.
    pulumi.log.debug(f'looking up managed zone {config.zone_name}')
    invoke_opts = pulumi.InvokeOptions(parent=opts.parent, provider=opts.provider) if opts else None
    zone = gcp.dns.get_managed_zone(name=config.zone_name, opts=invoke_opts)

    dns_record = gcp.dns.RecordSet(
        'dns',
        name=f'{config.app_host_name}.{zone.dns_name}',
        type='A',
        ttl=RECORD_TTL,
        managed_zone=zone.name,
        rrdatas=[ip.address],
        opts=opts)

    # Route every request to the backend bucket.
    url_map = gcp.compute.URLMap(
        'url-map',
        default_service=backend_bucket.self_link,
        opts=opts)

    http_proxy = gcp.compute.TargetHttpProxy(
        'http-proxy',
        url_map=url_map.self_link,
        opts=opts)

    http_forwarding_rule = gcp.compute.GlobalForwardingRule(
        'http-forwarding-rule',
        ip_address=ip.address,
        ip_protocol='TCP',
        port_range='80',
        target=http_proxy.self_link,
        opts=opts)

    certificate = gcp.compute.ManagedSslCertificate(
        config.zone_name,
        managed=gcp.compute.ManagedSslCertificateManagedArgs(
            domains=[config.domain_name, config.app_domain],
        ),
        opts=opts)

    https_proxy = gcp.compute.TargetHttpsProxy(
        'https-proxy',
        ssl_certificates=[certificate.self_link],
        url_map=url_map.self_link,
        opts=opts)

    # Same address as the HTTP rule.
    https_forwarding_rule = gcp.compute.GlobalForwardingRule(
        'https-forwarding-rule',
        ip_address=ip.address,
        ip_protocol='TCP',
        port_range='443',
        target=https_proxy.self_link,
        opts=opts)

    return Site(
        bucket=bucket,
        bucket_iam_binding=bucket_iam_binding,
        synced_folder=folder,
        backend_bucket=backend_bucket,
        ip=ip,
        zone=zone,
        dns_record=dns_record,
        url_map=url_map,
        http_proxy=http_proxy,
        http_forwarding_rule=http_forwarding_rule,
        certificate=certificate,
        https_proxy=https_proxy,
        https_forwarding_rule=https_forwarding_rule,
    )
