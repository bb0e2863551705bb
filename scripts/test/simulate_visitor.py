"""Register sample visitors against a running backend and print the resulting list."""

import argparse
import requests

BACKEND_URL = "http://localhost:8080/api/v1"

SAMPLE_VISITORS = [
    {"fullName": "Maria Silva", "phone": "11987654321", "city": "São Paulo",
     "serviceDate": "10/03/2024", "serviceTime": "19:00"},
    {"fullName": "João Souza", "phone": "21912345678", "city": "Rio de Janeiro",
     "serviceDate": "10/03/2024", "serviceTime": "10:00", "observations": "Veio com a família"},
]


def register(base_url, visitor):
    resp = requests.post(f"{base_url}/visitors", json=visitor, timeout=10)
    print(f"✅ {visitor['fullName']} → HTTP {resp.status_code}: {resp.json()}")


def show_list(base_url, q=None):
    resp = requests.get(f"{base_url}/visitors", params={"q": q} if q else None, timeout=10)
    data = resp.json()
    print(f"\n👥 {data['count']}/{data['total']} visitor(s)")
    for v in data["visitors"]:
        print(f"   {v['fullName']} | {v['phone']} | {v['city']} | {v['serviceDate']} {v['serviceTime']}")


def send_whatsapp(base_url, number):
    resp = requests.post(f"{base_url}/exports/whatsapp", json={"number": number}, timeout=10)
    print(f"\n📱 WhatsApp → HTTP {resp.status_code}: {resp.json().get('url', resp.json())}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Simulate visitor registrations for testing")
    parser.add_argument("--url", default=BACKEND_URL)
    parser.add_argument("--search", default=None)
    parser.add_argument("--whatsapp", default=None, help="Destination number for the report link")
    args = parser.parse_args()

    for visitor in SAMPLE_VISITORS:
        register(args.url, visitor)
    show_list(args.url, args.search)
    if args.whatsapp:
        send_whatsapp(args.url, args.whatsapp)
