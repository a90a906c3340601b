"""HTTP handlers for registration, login and the current account."""

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.authentication import caller_from_request
from accounts.handlers.serializers import AccountSerializer, LoginSerializer, RegisterSerializer
from accounts.services import AuthService, TokenCodec
from accounts.stores import DjangoUserStore


def get_auth_service() -> AuthService:
    return AuthService(DjangoUserStore(), TokenCodec.from_settings())


class RegisterView(APIView):
    """Handler for POST /api/auth/register"""

    authentication_classes: list = []
    permission_classes = [AllowAny]

    def post(self, request: Request) -> Response:
        payload = RegisterSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        data = payload.validated_data

        account, token = get_auth_service().register(
            email=data["email"],
            password=data["password"],
            first_name=data["firstName"],
            last_name=data["lastName"],
            role=data["role"],
        )
        return Response(
            {"success": True, "token": token, "user": AccountSerializer(account).data},
            status=status.HTTP_201_CREATED,
        )


class LoginView(APIView):
    """Handler for POST /api/auth/login"""

    authentication_classes: list = []
    permission_classes = [AllowAny]

    def post(self, request: Request) -> Response:
        payload = LoginSerializer(data=request.data)
        payload.is_valid(raise_exception=True)

        account, token = get_auth_service().login(
            payload.validated_data["email"],
            payload.validated_data["password"],
        )
        return Response({"success": True, "token": token, "user": AccountSerializer(account).data})


class MeView(APIView):
    """Handler for GET /api/auth/me"""

    def get(self, request: Request) -> Response:
        account = get_auth_service().me(caller_from_request(request).id)
        return Response({"success": True, "user": AccountSerializer(account).data})
