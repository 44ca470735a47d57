"""
Tests for CatalogService and the ``flask countries`` CLI group.
"""
from extensions import db
from models.countries import Country
from services.catalog_service import CatalogService


class TestLoadCountries:
    def test_adds_new_rows(self, app):
        added, updated = CatalogService.load_countries([('ES', 'Spain'), ('FR', 'France')])

        assert (added, updated) == (2, 0)
        assert CatalogService.count() == 2

    def test_renames_existing_and_is_idempotent(self, app):
        CatalogService.load_countries([('CZ', 'Czech Republic')])

        assert CatalogService.load_countries([('CZ', 'Czechia')]) == (0, 1)
        assert CatalogService.load_countries([('CZ', 'Czechia')]) == (0, 0)
        assert db.session.get(Country, 'CZ').country_name == 'Czechia'

    def test_read_csv_skips_blank_rows(self, app, tmp_path):
        path = tmp_path / 'countries.csv'
        path.write_text(
            'country_code,country_name\n'
            'es,Spain\n'
            ',Nowhere\n'
            'XX,\n'
            'BQ,"Bonaire, Sint Eustatius and Saba"\n',
            encoding='utf-8',
        )

        assert list(CatalogService.read_csv(str(path))) == [
            ('ES', 'Spain'),
            ('BQ', 'Bonaire, Sint Eustatius and Saba'),
        ]

    def test_bundled_catalog_loads(self, app):
        added, _ = CatalogService.seed_from_csv()

        assert added > 200
        assert db.session.get(Country, 'ES').country_name == 'Spain'


class TestCountriesCli:
    def test_seed_and_count(self, app, tmp_path):
        path = tmp_path / 'countries.csv'
        path.write_text('country_code,country_name\nES,Spain\nPT,Portugal\n', encoding='utf-8')
        runner = app.test_cli_runner()

        result = runner.invoke(args=['countries', 'seed', '--csv', str(path)])
        assert result.exit_code == 0
        assert '2 countries added' in result.output

        result = runner.invoke(args=['countries', 'count'])
        assert result.output.strip() == '2'
