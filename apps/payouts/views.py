from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema

from apps.accounts.permissions import IsAdministrator
from apps.accounts.serializers import OkResponseSerializer, MessageResponseSerializer

from .serializers import AccountDetailsInputSerializer, AccountDetailsSerializer
from .services import get_account_details, set_account_details


class AccountDetailsView(APIView):
    """
    Payout instructions shown on the payment page.

    GET /account-details  - public
    PUT /account-details  - administrator only
    """

    def get_permissions(self):
        """Reads are public, writes need an administrator session."""
        if self.request.method == 'PUT':
            return [IsAdministrator()]
        return [AllowAny()]

    @extend_schema(
        responses={200: AccountDetailsSerializer},
        description="Get the current bank and crypto payout instructions.",
        tags=['account-details'],
    )
    def get(self, request):
        return Response(get_account_details())

    @extend_schema(
        request=AccountDetailsInputSerializer,
        responses={
            200: OkResponseSerializer,
            400: MessageResponseSerializer,
            401: MessageResponseSerializer,
        },
        description="Replace the payout instructions. Omitted sections are stored as {}.",
        tags=['account-details'],
    )
    def put(self, request):
        serializer = AccountDetailsInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        set_account_details(
            bank=serializer.validated_data.get('bank'),
            crypto=serializer.validated_data.get('crypto'),
        )

        return Response({'ok': True})
