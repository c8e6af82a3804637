from fastapi import APIRouter, Depends, Request

from common.receipts import RawReceipt
from common.receipts.service import ReceiptService
from common.store.points import PointsStore

router = APIRouter(prefix="/receipts", tags=["receipts"])


def get_store(request: Request) -> PointsStore:
    return request.app.state.store


def get_service(store: PointsStore = Depends(get_store)) -> ReceiptService:
    return ReceiptService(store)


@router.post("/process")
def process_receipt(receipt: RawReceipt, service: ReceiptService = Depends(get_service)):
    return {"id": service.process(receipt)}


@router.get("/{receipt_id}/points")
def get_points(receipt_id: str, service: ReceiptService = Depends(get_service)):
    return {"points": service.points(receipt_id)}
