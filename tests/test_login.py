"""Unit tests for ocenv.login."""

import pytest

from ocenv.errors import ContractViolation
from ocenv.login import generate_login_command, has_login_command
from ocenv.models import (
    IndividualClusterCredentials,
    KubeconfigCredentials,
    resolve_credentials,
)


class TestGenerateLoginCommand:
    def test_cluster_login_with_token(self):
        credentials = resolve_credentials(cluster_id="test-cluster")
        assert generate_login_command(credentials) == "ocm cluster login --token test-cluster"

    def test_individual_cluster_login(self):
        credentials = resolve_credentials(username="testuser", url="https://api.test.com:6443")
        assert (
            generate_login_command(credentials)
            == "oc login -u testuser https://api.test.com:6443"
        )

    def test_individual_cluster_login_with_password(self):
        credentials = resolve_credentials(
            username="testuser",
            password="testpass",
            url="https://api.test.com:6443",
        )
        assert (
            generate_login_command(credentials)
            == "oc login -u testuser -p testpass https://api.test.com:6443"
        )

    def test_cluster_id_takes_precedence_over_username(self):
        credentials = resolve_credentials(
            cluster_id="test-cluster",
            username="testuser",
            password="testpass",
            url="https://api.test.com:6443",
        )
        assert generate_login_command(credentials) == "ocm cluster login --token test-cluster"

    def test_arguments_are_shell_quoted(self):
        credentials = resolve_credentials(
            username="test user",
            password="p@ss word",
            url="https://api.test.com:6443",
        )
        assert (
            generate_login_command(credentials)
            == "oc login -u 'test user' -p 'p@ss word' https://api.test.com:6443"
        )

    def test_kubeconfig_mode_has_no_login_command(self):
        with pytest.raises(ContractViolation):
            generate_login_command(KubeconfigCredentials())

    def test_missing_username_aborts_even_when_validation_was_bypassed(self):
        credentials = IndividualClusterCredentials.model_construct(
            username="", url="https://api.test.com:6443"
        )
        with pytest.raises(ContractViolation, match="username"):
            generate_login_command(credentials)

    def test_missing_url_aborts_even_when_validation_was_bypassed(self):
        credentials = IndividualClusterCredentials.model_construct(username="testuser", url="")
        with pytest.raises(ContractViolation, match="URL"):
            generate_login_command(credentials)


class TestHasLoginCommand:
    def test_token_and_individual_modes_need_login(self):
        assert has_login_command(resolve_credentials(cluster_id="c")) is True
        assert has_login_command(resolve_credentials(username="u", url="https://api.x:6443")) is True

    def test_kubeconfig_mode_does_not(self):
        assert has_login_command(resolve_credentials()) is False
