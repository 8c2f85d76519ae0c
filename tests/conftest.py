"""Pytest configuration and fixtures."""

import copy
import json

import pytest

from core.models import ConversionOptions
from core.prune import SUPPORT_FILES

CONTENT_JS = """import "./excel";
import "./powerpoint";

Office.onReady(() => {
  document.getElementById("app-body").style.display = "flex";
});
"""

LAUNCH_JSON = """{
  "version": "0.2.0",
  "configurations": [
    {
      "name": "Debug Tests",
      "type": "node",
      "request": "launch",
      "program": "${workspaceFolder}/node_modules/mocha/bin/_mocha",
      "args": ["-u", "bdd"]
    },
    {
      "name": "Excel Desktop (Edge Chromium)",
      "type": "msedge",
      "request": "attach",
      "port": 9229
    }
  ]
}
"""

WEBPACK_CONFIG = """module.exports = async (env, options) => {
  return {
    plugins: [
      new CopyWebpackPlugin({
        patterns: [
          { from: "manifest*.xml", to: "[name]" + "[ext]" },
        ],
      }),
    ],
    devServer: { static: { directory: "manifest.xml" } },
  };
};
"""

PACKAGE_JSON = {
    "name": "office-addin-taskpane-content",
    "config": {"app_to_debug": "excel", "app_type_to_debug": "desktop", "dev_server_port": 3000},
    "engines": {"node": ">=16 <21"},
    "scripts": {
        "build": "webpack --mode production",
        "convert-to-single-host": "node convertToSingleHost.js",
        "lint": "office-addin-lint check",
        "sideload:excel": "office-addin-debugging start manifest.excel.xml",
        "start": "office-addin-debugging start manifest.xml",
        "start:desktop": "office-addin-debugging start manifest.xml desktop",
        "start:web": "office-addin-debugging start manifest.xml web",
        "stop": "office-addin-debugging stop manifest.xml",
        "test": "mocha -r ts-node/register test/unit/*.test.ts",
        "test:e2e": "mocha -r ts-node/register test/end-to-end/*.ts",
        "unload:excel": "office-addin-debugging stop manifest.excel.xml",
        "validate": "office-addin-manifest validate manifest.xml",
    },
    "devDependencies": {
        "@types/mocha": "^10.0.0",
        "@types/node": "^20.0.0",
        "mocha": "^10.0.0",
        "office-addin-debugging": "^5.0.0",
        "ts-node": "^10.9.0",
        "webpack": "^5.88.0",
    },
}

TASKS_JSON = {
    "version": "2.0.0",
    "tasks": [
        {"label": "Build (Development)", "type": "npm", "script": "build:dev"},
        {"label": "Build (Production)", "type": "npm", "script": "build"},
        {"label": "Debug: Excel Desktop", "type": "npm", "script": "start", "dependsOn": ["Check OS"]},
        {"label": "Install", "type": "shell", "command": "npm install"},
        {"label": "Lint: Check for problems", "type": "npm", "script": "lint"},
    ],
}

@pytest.fixture
def template_project(tmp_path):
    """Create a multi-host add-in template on disk."""
    content_dir = tmp_path / "src" / "content"
    content_dir.mkdir(parents=True)
    (content_dir / "content.js").write_text(CONTENT_JS)
    (content_dir / "excel.js").write_text("// excel\n")
    (content_dir / "powerpoint.js").write_text("// powerpoint\n")

    for manifest_format in ("xml", "json"):
        (tmp_path / f"manifest.{manifest_format}").write_text(f"default {manifest_format}")
        for host in ("excel", "powerpoint", "xp"):
            (tmp_path / f"manifest.{host}.{manifest_format}").write_text(f"{host} {manifest_format}")

    vscode = tmp_path / ".vscode"
    vscode.mkdir()
    (vscode / "launch.json").write_text(LAUNCH_JSON)
    (vscode / "tasks.json").write_text(json.dumps(TASKS_JSON, indent=2))

    (tmp_path / "package.json").write_text(json.dumps(PACKAGE_JSON, indent=2))
    (tmp_path / "webpack.config.js").write_text(WEBPACK_CONFIG)

    for folder in ("test/unit", ".github/workflows", ".azure-devops"):
        (tmp_path / folder).mkdir(parents=True)
    (tmp_path / "test" / "unit" / "excel.test.ts").write_text("// test\n")
    (tmp_path / ".github" / "workflows" / "ci.yml").write_text("name: ci\n")
    (tmp_path / ".azure-devops" / "pipeline.yml").write_text("trigger: none\n")

    for name in SUPPORT_FILES:
        (tmp_path / name).write_text(name)

    return tmp_path


@pytest.fixture
def make_options(template_project):
    """Build conversion options rooted at the template project."""
    def _make(host="excel", manifest_format="xml", project_name=None, app_id=None):
        return ConversionOptions.from_args(host, manifest_format, project_name, app_id, template_project)

    return _make


@pytest.fixture
def package_descriptor():
    """A parsed package.json from the template."""
    return copy.deepcopy(PACKAGE_JSON)
