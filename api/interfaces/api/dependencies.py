from api.application.services.patrimonio_service import PatrimonioService


def get_patrimonio_service() -> PatrimonioService:
    return PatrimonioService()
