def test_any_role_lists_doctors_without_passwords(client, people, auth):
    response = client.get("/api/users/doctors", headers=auth(people["patient"]))

    assert response.status_code == 200
    doctors = response.json()
    assert [d["username"] for d in doctors] == ["dr.house", "dr.grey"]
    assert all("password" not in d for d in doctors)
    assert doctors[0]["fullName"] == "Dr House"


def test_patients_list_is_staff_only(client, people, auth):
    assert client.get("/api/users/patients", headers=auth(people["patient"])).status_code == 403

    for role in ("doctor", "nurse"):
        response = client.get("/api/users/patients", headers=auth(people[role]))
        assert response.status_code == 200
        patients = response.json()
        assert [p["id"] for p in patients] == [people["patient"].id, people["patient2"].id]
        assert all("password" not in p for p in patients)


def test_patients_list_denial_message(client, people, auth):
    response = client.get("/api/users/patients", headers=auth(people["patient"]))
    assert response.json() == {"message": "Forbidden"}


def test_get_doctor_by_id(client, people, auth):
    headers = auth(people["patient"])

    response = client.get(f"/api/users/doctors/{people['doctor'].id}", headers=headers)
    assert response.status_code == 200
    assert response.json()["username"] == "dr.house"
    assert "password" not in response.json()

    assert client.get(f"/api/users/doctors/{people['nurse'].id}", headers=headers).status_code == 404
    assert client.get("/api/users/doctors/999", headers=headers).status_code == 404


def test_get_patient_by_id_respects_ownership(client, people, auth):
    patient = people["patient"]
    path = f"/api/users/patients/{patient.id}"

    assert client.get(path, headers=auth(patient)).status_code == 200
    assert client.get(path, headers=auth(people["patient2"])).status_code == 403
    assert client.get(path, headers=auth(people["doctor"])).status_code == 200
    assert client.get(path, headers=auth(people["nurse"])).status_code == 200
    assert client.get("/api/users/patients/999", headers=auth(people["nurse"])).status_code == 404
