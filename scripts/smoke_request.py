import os

import requests

url = os.environ.get('CALCULATOR_URL', 'http://localhost:5000') + "/calculate"
payload = {
    "origin": "São Paulo",
    "destination": "Rio de Janeiro",
    "transport": "car",
    "people": 2
}
headers = {
    "Content-Type": "application/json"
}

if __name__ == '__main__':
    response = requests.post(url, json=payload, headers=headers, timeout=10)
    print(response.status_code)
    print(response.json())
