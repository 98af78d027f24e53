import io
import json
import unittest

from rglister.reporting import print_access_token, report_resource_groups, report_resource_groups_json
from rglister.typedefs import ResourceGroup

BANNER = '###########################################Resource Groups##################################################'


class TestReportResourceGroups(unittest.TestCase):

    def test_numbered_entries(self):
        out = io.StringIO()
        report_resource_groups([
            ResourceGroup('/subscriptions/x/resourceGroups/rg1', 'rg1'),
            ResourceGroup('/subscriptions/x/resourceGroups/rg2', 'rg2'),
        ], out=out)
        self.assertEqual(out.getvalue().splitlines(), [
            BANNER,
            '1. Name: rg1',
            '   ID: /subscriptions/x/resourceGroups/rg1',
            '2. Name: rg2',
            '   ID: /subscriptions/x/resourceGroups/rg2',
        ])

    def test_empty_prints_only_banner(self):
        out = io.StringIO()
        report_resource_groups([], out=out)
        self.assertEqual(out.getvalue(), BANNER + '\n')

    def test_json(self):
        out = io.StringIO()
        report_resource_groups_json([ResourceGroup('/subscriptions/x/resourceGroups/rg1', 'rg1')], out=out)
        self.assertEqual(json.loads(out.getvalue()), {'value': [{'id': '/subscriptions/x/resourceGroups/rg1', 'name': 'rg1'}]})

    def test_token_masked(self):
        out = io.StringIO()
        print_access_token('eyJ0eXAi', out=out)
        print_access_token('eyJ0eXAi', show_secrets=True, out=out)
        self.assertEqual(out.getvalue().splitlines(), ['Access Token: ****', 'Access Token: eyJ0eXAi'])
