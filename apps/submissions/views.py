from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema

from apps.accounts.permissions import IsAdministrator
from apps.accounts.serializers import OkResponseSerializer, MessageResponseSerializer

from .serializers import (
    SubmissionCreateSerializer,
    SubmissionCreatedSerializer,
    SubmissionSerializer,
    SubmissionStatusInputSerializer,
)
from .services import (
    create_submission,
    list_submissions,
    set_submission_status,
    InvalidSubmissionError,
    InvalidStatusTransitionError,
    SubmissionNotFoundError,
    SubmissionStorageError,
)


def _server_error():
    return Response(
        {'message': 'Server error'},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR
    )


class SubmissionListCreateView(APIView):
    """
    Payment claims.

    POST /submissions  - submit a claim with files (public)
    GET  /submissions  - list claims, newest first (administrator)
    """

    parser_classes = [MultiPartParser, FormParser, JSONParser]

    def get_permissions(self):
        """Listing needs an administrator session, submitting is public."""
        if self.request.method == 'GET':
            return [IsAdministrator()]
        return [AllowAny()]

    @extend_schema(
        responses={
            200: SubmissionSerializer(many=True),
            401: MessageResponseSerializer,
        },
        description="List submissions, newest first (at most 1000).",
        tags=['submissions'],
    )
    def get(self, request):
        try:
            submissions = list_submissions()
        except SubmissionStorageError:
            return _server_error()

        return Response(SubmissionSerializer(submissions, many=True).data)

    @extend_schema(
        request={'multipart/form-data': SubmissionCreateSerializer},
        responses={
            201: SubmissionCreatedSerializer,
            400: MessageResponseSerializer,
        },
        description="Submit a payment claim with an identity file and optional payment proof.",
        tags=['submissions'],
    )
    def post(self, request):
        serializer = SubmissionCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            submission = create_submission(
                name=data['name'],
                email=data['email'],
                method=data['method'],
                amount=data['amount'],
                id_file=data['idFile'],
                selected_network=data.get('selectedNetwork'),
                txid=data.get('txid'),
                payment_proof=data.get('paymentProof'),
            )
        except InvalidSubmissionError as e:
            body = {'message': str(e)}
            if e.field:
                body['errors'] = {e.field: [str(e)]}
            return Response(body, status=status.HTTP_400_BAD_REQUEST)
        except SubmissionStorageError:
            return _server_error()

        return Response({'id': submission.id}, status=status.HTTP_201_CREATED)


@extend_schema(
    request=SubmissionStatusInputSerializer,
    responses={
        200: OkResponseSerializer,
        400: MessageResponseSerializer,
        401: MessageResponseSerializer,
        404: MessageResponseSerializer,
    },
    description="Mark a submission confirmed. Only \"confirmed\" is accepted; repeating it is a no-op.",
    tags=['submissions'],
)
@api_view(['PUT'])
@permission_classes([IsAdministrator])
def update_status(request, submission_id):
    """Move a submission from pending to confirmed."""
    serializer = SubmissionStatusInputSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        set_submission_status(
            submission_id=submission_id,
            status=serializer.validated_data['status'],
        )
    except InvalidStatusTransitionError as e:
        return Response({'message': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    except SubmissionNotFoundError as e:
        return Response({'message': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except SubmissionStorageError:
        return _server_error()

    return Response({'ok': True})
