from dataclasses import dataclass
from typing import Tuple

import pulumi

# (key, default) for every setting this stack reads.
DEFAULTS = (
    ('path', './build'),
    ('indexDocument', 'index.html'),
    ('errorDocument', 'error.html'),
    ('frontendAppBucketName', 'frontend-app-bucket'),
    ('domainName', 'super-awesome-test-site.com'),
    ('appHostName', 'app'),
)


def get_value_with_fallback(config, key, fallback):
    # Empty counts as unset. Second item is True when fallback was used.
    value = config.get(key)
    if not value:
        return fallback, True
    return value, False


def zone_name_for(domain_name):
    # Cloud DNS zone names can't contain dots
    return domain_name.replace('.', '-')


@dataclass(frozen=True)
class SiteConfig:
    path: str
    index_document: str
    error_document: str
    bucket_name: str
    domain_name: str
    app_host_name: str
    defaulted: Tuple[str, ...] = ()

    @property
    def zone_name(self):
        return zone_name_for(self.domain_name)

    @property
    def app_domain(self):
        return f'{self.app_host_name}.{self.domain_name}'

    @classmethod
    def from_pulumi_config(cls, config):
        values = []
        defaulted = []
        for key, fallback in DEFAULTS:
            value, used_fallback = get_value_with_fallback(config, key, fallback)
            values.append(value)
            if used_fallback:
                defaulted.append(key)
        return cls(*values, defaulted=tuple(defaulted))


def warn_defaults(site_config):
    fallbacks = dict(DEFAULTS)
    for key in site_config.defaulted:
        pulumi.log.warn(f"config '{key}' is not set, using default '{fallbacks[key]}'")
