"""
Pulumi mocks for the static site program
"""

import pulumi

ZONE_DNS_NAME = 'example.com.'
IP_ADDRESS = '203.0.113.10'


class SiteMocks(pulumi.runtime.Mocks):
    """Echo resource inputs back as outputs and fake the engine-assigned ones"""

    def __init__(self):
        super().__init__()
        self.inputs = {}
        self.calls = []

    def new_resource(self, args: pulumi.runtime.MockResourceArgs):
        self.inputs[args.name] = args.inputs
        outputs = dict(args.inputs)
        if args.typ == 'gcp:storage/bucket:Bucket':
            outputs['name'] = args.name
        if args.typ == 'gcp:compute/globalAddress:GlobalAddress':
            outputs['address'] = IP_ADDRESS
        if args.typ.startswith('gcp:compute/'):
            outputs['selfLink'] = f'https://www.googleapis.com/compute/v1/projects/test-project/global/{args.name}'
        return [f'{args.name}_id', outputs]

    def call(self, args: pulumi.runtime.MockCallArgs):
        self.calls.append(args)
        if args.token == 'gcp:dns/getManagedZone:getManagedZone':
            return {
                'id': f"projects/test-project/managedZones/{args.args['name']}",
                'name': args.args['name'],
                'dnsName': ZONE_DNS_NAME,
                'project': 'test-project',
            }
        return {}


def set_mocks():
    mocks = SiteMocks()
    pulumi.runtime.set_mocks(mocks, project='static-site-gcp', stack='test', preview=False)
    return mocks
