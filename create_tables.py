from animelog.db import engine, Base
# Tüm modelleri tek seferde import et
from animelog import models  # noqa: F401

def main():
    """Tüm veritabanı tablolarını oluşturur"""
    Base.metadata.create_all(bind=engine)
    print("Tüm tablolar başarıyla oluşturuldu.")

if __name__ == "__main__":
    main()
