import io

import pytest
from rich.console import Console

from kymacleanup.cli.formatter import DeltaFormatter
from kymacleanup.core.errors import ScriptWriteError
from kymacleanup.core.models import ManifestIdentity
from kymacleanup.script.exporter import DeletionScriptExporter


def make_exporter():
    out = Console(file=io.StringIO(), highlight=False, soft_wrap=True, emoji=False)
    return DeletionScriptExporter(DeltaFormatter(out)), out


@pytest.mark.parametrize("identity, line", [
    (ManifestIdentity("apps/v1", "Deployment", "rafter-asyncapi-svc"),
     "kubectl delete -n kyma-system deployments.apps rafter-asyncapi-svc\n"),
    (ManifestIdentity("v1", "ConfigMap", "tracing-grafana-dashboard"),
     "kubectl delete -n kyma-system configmap tracing-grafana-dashboard\n"),
    (ManifestIdentity("policy/v1beta1", "PodSecurityPolicy", "002-kyma-privileged"),
     "kubectl delete -n kyma-system podsecuritypolicies.policy 002-kyma-privileged\n"),
    (ManifestIdentity("v1", "Service", "Mixed-Case"),
     "kubectl delete -n kyma-system service mixed-case\n"),
])
def test_command_shape(identity, line):
    exporter, _ = make_exporter()
    assert exporter.command(identity) == line


def test_export_writes_script_and_reports_path(tmp_path):
    exporter, out = make_exporter()
    target = tmp_path / "cleanup.sh"
    orphans = [
        ManifestIdentity("apps/v1", "Deployment", "rafter-asyncapi-svc"),
        ManifestIdentity("monitoring.coreos.com/v1", "ServiceMonitor", "rafter-controller-manager"),
    ]

    exporter.export(orphans, str(target))

    assert target.read_text() == (
        "#!/usr/bin/env bash\n"
        "\n"
        "kubectl delete -n kyma-system deployments.apps rafter-asyncapi-svc\n"
        "kubectl delete -n kyma-system servicemonitors.monitoring.coreos.com rafter-controller-manager\n"
    )
    assert f"Deletion script created: '{target}'" in out.file.getvalue()


def test_export_keeps_given_order(tmp_path):
    exporter, _ = make_exporter()
    orphans = [
        ManifestIdentity("v1", "Service", "b"),
        ManifestIdentity("v1", "ConfigMap", "a"),
    ]

    lines = exporter.render(orphans).splitlines()

    assert lines[2:] == [
        "kubectl delete -n kyma-system service b",
        "kubectl delete -n kyma-system configmap a",
    ]


def test_export_failure(tmp_path):
    exporter, out = make_exporter()
    target = tmp_path / "missing-dir" / "cleanup.sh"

    with pytest.raises(ScriptWriteError) as exc:
        exporter.export([ManifestIdentity("v1", "ConfigMap", "foo")], str(target))

    assert str(exc.value).startswith("error writing to file: ")
    assert "Deletion script created" not in out.file.getvalue()
