from modules.auth.interfaces import IAuthService
from modules.auth.service import AuthService


class TestAuthInterface:
    def test_interface_methods_exist(self):
        """IAuthService should define required methods."""
        for method in ["issue_token", "validate_token", "revoke_token", "authorize"]:
            assert hasattr(IAuthService, method)

    def test_service_satisfies_interface(self, auth_service):
        """AuthService instances should satisfy the runtime-checkable protocol."""
        assert isinstance(auth_service, AuthService)
        assert isinstance(auth_service, IAuthService)
