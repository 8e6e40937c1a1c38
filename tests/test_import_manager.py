"""
Unit tests for ImportManager.
"""

from plengi_installer.mutation import ImportManager


class TestImportManager:

    def test_inserts_after_last_import(self):
        lines = ["import UIKit", "import CoreLocation", "", "class A {}"]
        index = ImportManager("Plengi").ensure_import(lines)

        assert index == 2
        assert lines == ["import UIKit", "import CoreLocation", "import Plengi", "", "class A {}"]

    def test_existing_import_is_kept(self):
        lines = ["import UIKit", "  import Plengi  ", "class A {}"]
        assert ImportManager("Plengi").ensure_import(lines) is None
        assert lines == ["import UIKit", "  import Plengi  ", "class A {}"]

    def test_no_imports_inserts_at_top(self):
        lines = ["@main", "struct A: App {}"]
        index = ImportManager("Plengi").ensure_import(lines)
        assert index == 0
        assert lines[0] == "import Plengi"

    def test_attributed_imports_count(self):
        lines = ["import UIKit", "@testable import Weather", "class A {}"]
        assert ImportManager("Plengi").find_insertion_index(lines) == 2

    def test_similar_module_name_is_not_the_import(self):
        lines = ["import PlengiExtras"]
        manager = ImportManager("Plengi")
        assert not manager.has_import(lines)
        manager.ensure_import(lines)
        assert lines.count("import Plengi") == 1

    def test_existing_import_with_trailing_comment_semicolon_or_attribute(self):
        manager = ImportManager("Plengi")
        for existing in ("import Plengi // location SDK", "import Plengi;", "@_exported import Plengi"):
            lines = ["import UIKit", existing, "class A {}"]
            assert manager.ensure_import(lines) is None
            assert lines == ["import UIKit", existing, "class A {}"]

    def test_commented_out_import_does_not_count(self):
        lines = ["import UIKit", "// import Plengi", "/*", "import Plengi", "*/", "class A {}"]
        manager = ImportManager("Plengi")

        assert not manager.has_import(lines)
        assert manager.ensure_import(lines) == 1
        assert lines[1] == "import Plengi"
